"""Integration tests for the end-to-end recipe sync pipeline."""

from __future__ import annotations

import base64
import csv
import json

import requests
import responses

from core.types import CandidateSource, SyncOptions
from ingest.pipeline import RecipeSyncRunner
from store.record_payload import flat_row_from_csv_fields, flat_row_from_payload
from tests.fixture_paths import fixture_path, read_fixture_text

API = "https://api.github.com/repos"


@responses.activate
def test_sync_discovers_via_tree_and_decodes_blob(make_config) -> None:
    """Sync should survive a dead candidate and read a base64 blob."""
    dump_text = read_fixture_text("raw/recipes_sample.json")
    blob_url = f"{API}/ao-data/ao-bin-dumps/git/blobs/feed"
    responses.add(responses.GET, f"{API}/gone/dumps/contents/formatted", status=404)
    responses.add(responses.GET, f"{API}/gone/dumps/git/trees/master", status=404)
    responses.add(responses.GET, f"{API}/ao-data/ao-bin-dumps/contents/formatted", status=404)
    responses.add(
        responses.GET,
        f"{API}/ao-data/ao-bin-dumps/git/trees/main",
        json={"tree": [{"path": "formatted/recipes.json", "type": "blob", "url": blob_url}]},
    )
    responses.add(
        responses.GET,
        blob_url,
        json={"encoding": "base64", "content": base64.b64encode(dump_text.encode()).decode()},
    )
    config = make_config(token="t0ken")
    options = SyncOptions(
        candidates=(
            CandidateSource("gone", "dumps", "master"),
            CandidateSource("ao-data", "ao-bin-dumps", "main"),
        )
    )

    result = RecipeSyncRunner(options, config, session=requests.Session()).run()

    assert result.location is not None and result.location.discovery_method == "tree"
    assert result.source_url == blob_url
    assert result.raw_record_count == 5
    assert result.flat_row_count == 5
    json_rows = [
        flat_row_from_payload(payload)
        for payload in json.loads(result.artifacts.flat_json_path.read_text(encoding="utf-8"))
    ]
    with result.artifacts.flat_csv_path.open(encoding="utf-8", newline="") as handle:
        csv_rows = [flat_row_from_csv_fields(fields) for fields in list(csv.reader(handle))[1:]]
    assert json_rows == csv_rows
    assert json.loads(result.artifacts.raw_path.read_text(encoding="utf-8")) == json.loads(
        dump_text
    )
    assert all(
        call.request.headers.get("Authorization") == "Bearer t0ken" for call in responses.calls
    )


def test_sync_from_local_file_skips_network(make_config) -> None:
    """A local source file should be flattened without discovery."""
    options = SyncOptions(candidates=(), source_file=fixture_path("raw/recipes_sample.json"))

    result = RecipeSyncRunner(options, make_config()).run()

    assert result.location is None
    assert result.flat_row_count == 5
    assert result.artifacts.flat_csv_path.exists()
