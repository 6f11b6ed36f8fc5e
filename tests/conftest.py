"""Pytest configuration and fixtures."""

import pytest
from multipart_body.part import Part


@pytest.fixture
def sample_parts():
    """Two simple name/value parts."""
    return [Part("name", "value"), Part("name2", "value2")]


@pytest.fixture
def file_source(tmp_path):
    """An open binary file containing b'hello'."""
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    with open(path, "rb") as f:
        yield f


@pytest.fixture
def example_text():
    """Expected rendering of sample_parts with a fixed boundary."""
    return (
        b"------multipart-boundary-307380\r\n"
        b'Content-Disposition: form-data; name="name"\r\n'
        b"\r\n"
        b"value\r\n"
        b"------multipart-boundary-307380\r\n"
        b'Content-Disposition: form-data; name="name2"\r\n'
        b"\r\n"
        b"value2\r\n"
        b"------multipart-boundary-307380--"
    )
