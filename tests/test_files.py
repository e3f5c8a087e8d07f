"""
Tests for /download, /upload/file and the app-level routes.
"""

import logging

import app.api.files as files_api
from app.config import STATIC_DIR


# --- GET /download ---

def test_download_returns_bundled_file(client):
    expected = (STATIC_DIR / "abc.txt").read_bytes()

    resp = client.get("/download")
    assert resp.status_code == 200
    assert resp.content == expected
    assert resp.headers["content-disposition"] == "attachment;filename=abc.txt"


def test_download_missing_file_returns_empty_500(client, monkeypatch, tmp_path, caplog):
    caplog.set_level(logging.INFO)
    monkeypatch.setattr(files_api, "STATIC_DIR", tmp_path)

    resp = client.get("/download")
    assert resp.status_code == 500
    assert resp.content == b""
    assert "content-disposition" not in resp.headers
    assert "Failed to read abc.txt" in caplog.text


# --- POST /upload/file ---

def test_upload_file_ok(client, caplog):
    caplog.set_level(logging.INFO)
    resp = client.post(
        "/upload/file",
        files={"file": ("report.csv", b"a,b\n1,2\n", "text/csv")},
    )
    assert resp.status_code == 200
    assert resp.json() == {"ok": True}
    assert "fileName: report.csv" in caplog.text


def test_upload_file_missing_field_is_rejected(client):
    resp = client.post("/upload/file", files={"other": ("x.txt", b"x")})
    assert resp.status_code == 422


# --- app-level ---

def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_requests_get_process_time_header(client):
    resp = client.get("/health")
    assert float(resp.headers["x-process-time"]) >= 0


def test_cors_allows_browser_client(client):
    resp = client.options(
        "/users",
        headers={
            "Origin": "http://localhost:4200",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:4200"
