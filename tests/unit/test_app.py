import pytest
from httpx import ASGITransport, AsyncClient

from naijastack import __version__
from naijastack.core.config import Config
from naijastack.main import create_app


class TestCreateApp:
    @pytest.mark.parametrize("debug", [True, False])
    def test_debug_flag_reaches_fastapi(self, config: Config, debug: bool) -> None:
        config.debug = debug

        app = create_app(config)

        assert app.debug is debug

    def test_components_built_from_config(self, config: Config) -> None:
        app = create_app(config)

        assert app.state.config is config
        assert app.state.dispatcher.handlers

    @pytest.mark.asyncio
    async def test_health_check(self, config: Config) -> None:
        async with AsyncClient(transport=ASGITransport(app=create_app(config)), base_url="http://test") as client:
            response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["version"] == __version__
