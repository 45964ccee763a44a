"""Console entry point — serves makesta.main:app through uvicorn."""

import makesta.main as main_module


def test_run_serves_app_with_configured_address(monkeypatch):
    calls = []
    monkeypatch.setattr(
        main_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)),
    )

    main_module.run()

    [(args, kwargs)] = calls
    assert args == ("makesta.main:app",)
    assert kwargs["host"] == main_module.settings.api_host
    assert kwargs["port"] == main_module.settings.api_port
    assert kwargs["log_config"] is None
