"""Tests for settings, logging setup and application assembly."""

import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from northwind_api.app.core.config import Settings
from northwind_api.app.core.logging_config import setup_logging
from northwind_api.app.main import create_app, open_product_store
from northwind_api.app.services.product_service import ProductService

SEED_FILE = Path(__file__).resolve().parent.parent / "seed" / "products.json"

ENV_VARS = [
    "PROJECT_NAME",
    "API_VERSION",
    "LOG_LEVEL",
    "LOG_FILE",
    "DATABASE_NAME",
    "SEED_FILE",
    "API_HOST",
    "API_PORT",
]


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.project_name == "Northwind API"
        assert settings.api_version == "1.0.0"
        assert settings.log_level == "INFO"
        assert settings.log_file == ""
        assert settings.database_name == "NorthwindDb"
        assert settings.seed_file == ""
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PROJECT_NAME", "Catalog")
        monkeypatch.setenv("DATABASE_NAME", "CatalogDb")
        monkeypatch.setenv("SEED_FILE", "/tmp/products.json")
        monkeypatch.setenv("API_PORT", "9000")

        settings = Settings()

        assert settings.project_name == "Catalog"
        assert settings.database_name == "CatalogDb"
        assert settings.seed_file == "/tmp/products.json"
        assert settings.port == 9000


class TestSetupLogging:
    """Test root logger configuration."""

    @pytest.fixture
    def bare_root(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers = []
        yield root
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

    def test_console_handler_and_level(self, bare_root):
        setup_logging("debug")

        assert len(bare_root.handlers) == 1
        assert isinstance(bare_root.handlers[0], logging.StreamHandler)
        assert bare_root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, bare_root):
        setup_logging("chatty")
        assert bare_root.level == logging.INFO

    def test_file_handler(self, bare_root, tmp_path):
        logfile = tmp_path / "api.log"

        setup_logging("INFO", str(logfile))
        logging.getLogger("northwind_api.test").info("hello file")
        for handler in bare_root.handlers:
            handler.flush()

        assert any(isinstance(h, logging.FileHandler) for h in bare_root.handlers)
        assert "hello file" in logfile.read_text(encoding="utf-8")

    def test_configures_only_once(self, bare_root):
        setup_logging("INFO")
        setup_logging("DEBUG")

        assert len(bare_root.handlers) == 1
        assert bare_root.level == logging.INFO


class TestCreateApp:
    """Test application wiring."""

    def test_uses_given_service(self, service: ProductService):
        app = create_app(product_service=service)
        assert app.state.product_service is service

    def test_title_and_version_from_settings(self, service: ProductService, store_name: str):
        settings = Settings(project_name="Catalog", api_version="2.0.0", database_name=store_name)

        app = create_app(settings=settings, product_service=service)

        assert app.title == "Catalog"
        assert app.version == "2.0.0"

    def test_builds_seeded_service_from_settings(self, store_name: str):
        settings = Settings(database_name=store_name, seed_file=str(SEED_FILE))

        client = TestClient(create_app(settings=settings))
        response = client.get("/api/product")

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [1, 2, 3, 4, 5]

    def test_builds_empty_service_without_seed_file(self, store_name: str):
        settings = Settings(database_name=store_name, seed_file="")

        client = TestClient(create_app(settings=settings))

        assert client.get("/api/product").json() == []

    def test_open_product_store_rejects_bad_seed_file(self, store_name: str, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(ValueError):
            open_product_store(Settings(database_name=store_name, seed_file=str(path)))

    def test_non_finite_seed_price_rejected(self, store_name: str, tmp_path):
        path = tmp_path / "infinite.json"
        path.write_text('[{"id": 1, "name": "Chai", "price": 1e999}]', encoding="utf-8")

        with pytest.raises(ValueError):
            create_app(settings=Settings(database_name=store_name, seed_file=str(path)))

    def test_owned_store_closed_on_shutdown(self, store_name: str):
        app = create_app(settings=Settings(database_name=store_name, seed_file=str(SEED_FILE)))

        with TestClient(app) as client:
            assert len(client.get("/api/product").json()) == 5
            assert not app.state.product_context.closed

        assert app.state.product_context.closed

    def test_given_service_store_left_open_on_shutdown(self, context, service: ProductService):
        app = create_app(product_service=service)

        with TestClient(app) as client:
            client.get("/api/product")

        assert app.state.product_context is None
        assert not context.closed
