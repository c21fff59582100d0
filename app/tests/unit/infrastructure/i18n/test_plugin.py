"""Tests for infrastructure.i18n.plugin module."""

import asyncio

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.i18n import (
    ConfigurationError,
    I18nDep,
    MissingDefaultLocaleError,
    NoLocalesError,
    PluginNotRegisteredError,
    Translator,
    get_i18n,
    i18n_lifespan,
    register,
    register_async,
)
from infrastructure.i18n.plugin import unregister


def _add_greeting_route(app: FastAPI) -> None:
    @app.get("/greeting")
    def greeting(i18n: I18nDep, locale: str | None = None):
        return {"message": i18n.t("hi", {"locale": locale})}


@pytest.mark.unit
class TestRegister:
    """Tests for register()."""

    def test_register_binds_translator_to_app_state(self, fixture_locales_dir):
        app = FastAPI()
        translator = register(app, {"localesPath": fixture_locales_dir})

        assert isinstance(translator, Translator)
        assert app.state.i18n is translator
        assert list(app.state.i18n.locales) == ["en"]

    def test_register_failure_leaves_state_untouched(self):
        app = FastAPI()
        with pytest.raises(MissingDefaultLocaleError):
            register(app, {"defaultLocale": "jp"})
        assert getattr(app.state, "i18n", None) is None

    def test_register_twice_fails(self, fixture_locales_dir):
        app = FastAPI()
        first = register(app, {"localesPath": fixture_locales_dir})

        with pytest.raises(ConfigurationError):
            register(app, {"localesPath": fixture_locales_dir})
        assert app.state.i18n is first

    def test_register_after_unregister_builds_fresh_translator(
        self, fixture_locales_dir
    ):
        app = FastAPI()
        first = register(app, {"localesPath": fixture_locales_dir})
        unregister(app)
        second = register(app, {"localesPath": fixture_locales_dir})
        assert second is not first

    def test_register_reads_settings_when_options_omitted(
        self, monkeypatch, fixture_locales_dir
    ):
        monkeypatch.setenv("I18N_LOCALES_PATH", str(fixture_locales_dir))
        monkeypatch.setenv("I18N_DEFAULT_LOCALE", "en")

        app = FastAPI()
        translator = register(app)
        assert translator.t("hi") == "Hello"

    def test_register_without_any_locales_fails(self, monkeypatch, tmp_path):
        monkeypatch.setenv("I18N_LOCALES_PATH", str(tmp_path / "missing"))

        with pytest.raises(NoLocalesError):
            register(FastAPI())

    @pytest.mark.asyncio
    async def test_register_async(self, fixture_locales_dir):
        app = FastAPI()
        translator = await register_async(
            app, {"localesPath": fixture_locales_dir, "locales": {"it": {"hi": "Ciao"}}}
        )
        assert app.state.i18n is translator
        assert translator.t("hi", {"locale": "it"}) == "Ciao"

    @pytest.mark.asyncio
    async def test_concurrent_register_async_binds_once(self, fixture_locales_dir):
        app = FastAPI()
        options = {"localesPath": fixture_locales_dir}

        results = await asyncio.gather(
            register_async(app, options),
            register_async(app, options),
            return_exceptions=True,
        )

        translators = [r for r in results if isinstance(r, Translator)]
        errors = [r for r in results if isinstance(r, ConfigurationError)]
        assert len(translators) == 1
        assert len(errors) == 1
        assert app.state.i18n is translators[0]


@pytest.mark.unit
class TestDependency:
    """Tests for get_i18n() / I18nDep."""

    def test_route_receives_translator(self, fixture_locales_dir):
        app = FastAPI()
        register(
            app, {"localesPath": fixture_locales_dir, "locales": {"it": {"hi": "Ciao"}}}
        )
        _add_greeting_route(app)

        client = TestClient(app)
        assert client.get("/greeting").json() == {"message": "Hello"}
        assert client.get("/greeting", params={"locale": "it"}).json() == {
            "message": "Ciao"
        }
        assert client.get("/greeting", params={"locale": "de"}).json() == {
            "message": "Hello"
        }

    def test_dependency_without_registration_raises(self):
        app = FastAPI()
        _add_greeting_route(app)

        client = TestClient(app, raise_server_exceptions=True)
        with pytest.raises(PluginNotRegisteredError):
            client.get("/greeting")

    def test_dependency_can_be_overridden(self):
        app = FastAPI()
        _add_greeting_route(app)
        app.dependency_overrides[get_i18n] = lambda: Translator(
            {"en": {"hi": "Howdy"}}
        )

        client = TestClient(app)
        assert client.get("/greeting").json() == {"message": "Howdy"}


@pytest.mark.unit
class TestLifespan:
    """Tests for i18n_lifespan()."""

    def test_lifespan_registers_on_startup(self, fixture_locales_dir):
        app = FastAPI(lifespan=i18n_lifespan({"localesPath": fixture_locales_dir}))
        _add_greeting_route(app)

        with TestClient(app) as client:
            assert isinstance(app.state.i18n, Translator)
            assert client.get("/greeting").json() == {"message": "Hello"}

        assert app.state.i18n is None

    def test_lifespan_startup_fails_without_default_dictionary(self):
        app = FastAPI(lifespan=i18n_lifespan({"defaultLocale": "jp"}))

        with pytest.raises(MissingDefaultLocaleError):
            with TestClient(app):
                pass

    @pytest.mark.asyncio
    async def test_lifespan_unregisters_when_body_raises(self, fixture_locales_dir):
        app = FastAPI()
        lifespan = i18n_lifespan({"localesPath": fixture_locales_dir})

        with pytest.raises(RuntimeError, match="boom"):
            async with lifespan(app):
                assert isinstance(app.state.i18n, Translator)
                raise RuntimeError("boom")

        assert app.state.i18n is None
