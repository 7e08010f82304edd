"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_neurolens():
    """Verify neurolens package can be imported."""
    from neurolens.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "capture_interval_ms")


def test_app_routes_registered():
    from neurolens.main import app

    paths = {route.path for route in app.routes}
    assert "/api/v1/control/capture" in paths
    assert "/api/v1/control/status" in paths
