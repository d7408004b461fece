"""Unit tests for Cloudinary helpers."""

import hashlib

import pytest

from skillswap.adapter.error import MediaStorageError
from skillswap.adapter.media.cloudinary import extract_public_id, sign_params


class TestSignParams:
    """Tests for sign_params function."""

    def test_signature_is_sha1_of_sorted_params_and_secret(self):
        """Parameters are sorted by name before signing."""
        signature = sign_params(
            {"timestamp": "1315060510", "public_id": "sample"}, "abcd"
        )

        expected = hashlib.sha1(
            b"public_id=sample&timestamp=1315060510abcd"
        ).hexdigest()
        assert signature == expected

    def test_different_secret_changes_signature(self):
        params = {"timestamp": "1"}

        assert sign_params(params, "one") != sign_params(params, "two")


class TestExtractPublicId:
    """Tests for extract_public_id function."""

    def test_versioned_delivery_url(self):
        url = "https://res.cloudinary.com/demo/image/upload/v1712/profile-photos/abc.jpg"

        assert extract_public_id(url) == "profile-photos/abc"

    def test_url_with_transformation_and_query(self):
        url = (
            "https://res.cloudinary.com/demo/image/upload/"
            "c_fill,h_400,w_400/v3/profile-photos/abc.png?_a=xyz"
        )

        assert extract_public_id(url) == "profile-photos/abc"

    def test_bare_public_id_is_returned_as_is(self):
        assert extract_public_id(" profile-photos/abc ") == "profile-photos/abc"

    def test_non_upload_url_is_rejected(self):
        with pytest.raises(MediaStorageError):
            extract_public_id("https://res.cloudinary.com/demo/image/fetch/abc.jpg")

    def test_empty_id_is_rejected(self):
        with pytest.raises(MediaStorageError):
            extract_public_id("   ")
