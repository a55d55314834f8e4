from __future__ import annotations

import pydebounce


def test_package_exports_public_api():
    expected = {
        "debounce",
        "throttle",
        "Debounced",
        "DebounceConfig",
        "ConfigurationError",
        "DebounceError",
        "TimerScheduler",
        "AsyncioScheduler",
        "FrameScheduler",
        "monotonic_ms",
    }
    assert set(pydebounce.__all__) == expected
    for name in expected:
        assert hasattr(pydebounce, name)


def test_controller_internals_are_not_exported():
    assert "InvocationController" not in pydebounce.__all__
    assert not hasattr(pydebounce, "InvocationController")
