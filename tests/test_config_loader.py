import json

import pytest
from unittest.mock import patch

from hireme.core import config_loader
from hireme.core.config_loader import get_categories, get_max_photos, load_marketplace_config
from hireme.services.listing_service import ListingService


def test_default_catalog():
    config = load_marketplace_config()
    assert get_categories(config) == [
        "Home Services", "Personal Care", "Tutoring", "Pet Services",
        "Event Services", "Fitness", "Technology", "Other",
    ]
    assert get_max_photos(config) == 3


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_marketplace_config(str(tmp_path / "nope.json"))


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_marketplace_config(str(path))


def test_photo_limit_defaults(tmp_path):
    path = tmp_path / "minimal.json"
    path.write_text(json.dumps({"categories": ["Other"]}), encoding="utf-8")
    config = load_marketplace_config(str(path))
    assert get_max_photos(config) == 3
    assert get_categories(config) == ["Other"]


def test_config_read_once_across_services(db, storage, profiles):
    config_loader.get_marketplace_config.cache_clear()
    try:
        with patch("hireme.core.config_loader.load_marketplace_config", wraps=load_marketplace_config) as loader:
            for _ in range(5):
                ListingService(db, storage, profiles)
            config_loader.get_marketplace_config()
        assert loader.call_count == 1
    finally:
        config_loader.get_marketplace_config.cache_clear()
