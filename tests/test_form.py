"""Tests for multipart_body.form module."""

import io

import pytest
from multipart_body.form import build_multipart


def _boundary(content_type):
    return content_type.split("boundary=")[1]


class TestBuildMultipart:
    """Tests for build_multipart function."""

    def test_build_with_only_files(self):
        """Test building multipart with only files."""
        content_type, body = build_multipart(None, {"doc": b"file content"})

        assert content_type.startswith("multipart/form-data; boundary=")
        assert b"file content" in body
        assert b'name="doc"; filename="doc"' in body
        assert b"Content-Type: application/octet-stream" in body

    def test_build_with_data_and_files(self):
        """Test data fields come before files."""
        data = {"field1": "value1", "field2": "value2"}
        _, body = build_multipart(data, {"upload": b"file content"})

        assert body.index(b"value1") < body.index(b"value2") < body.index(b"file content")

    def test_data_fields_have_no_filename(self):
        """Test plain fields are rendered without filename or type."""
        _, body = build_multipart({"key": "value"}, None)
        assert b'Content-Disposition: form-data; name="key"\r\n\r\nvalue' in body
        assert b"filename" not in body

    def test_build_with_file_tuple(self):
        """Test (filename, content, type) tuples."""
        files = {"doc": ("report.pdf", b"PDF content", "application/pdf")}
        _, body = build_multipart(None, files)

        assert b'filename="report.pdf"' in body
        assert b"Content-Type: application/pdf" in body
        assert b"PDF content" in body

    def test_build_with_file_tuple_no_content_type(self):
        """Test tuple with None content type defaults to octet-stream."""
        _, body = build_multipart(None, {"doc": ("file.bin", b"binary", None)})
        assert b"Content-Type: application/octet-stream" in body

    def test_build_with_two_tuple(self):
        """Test (filename, content) tuples."""
        _, body = build_multipart(None, {"doc": ("a.txt", b"abc")})
        assert b'filename="a.txt"' in body

    def test_build_with_file_object(self, file_source):
        """Test file objects are read and named after their path."""
        _, body = build_multipart(None, {"upload": file_source})
        assert b'name="upload"; filename="hello.txt"' in body
        assert b"\r\n\r\nhello\r\n" in body

    def test_build_with_nameless_stream(self):
        """Test streams without a path fall back to the field name."""
        _, body = build_multipart(None, {"upload": io.BytesIO(b"data")})
        assert b'filename="upload"' in body

    def test_unsupported_file_value(self):
        """Test unsupported file values raise TypeError."""
        with pytest.raises(TypeError):
            build_multipart(None, {"f": 123})

    def test_body_ends_with_closing_boundary(self):
        """Test body ends with closing boundary."""
        content_type, body = build_multipart(None, {"f": b"content"})
        assert body.endswith(f"--{_boundary(content_type)}--".encode())

    def test_empty(self):
        """Test building with nothing still yields delimiters."""
        content_type, body = build_multipart(None, {})
        boundary = _boundary(content_type)
        assert body == f"--{boundary}\r\n\r\n--{boundary}--".encode()
