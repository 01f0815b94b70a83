from service_desk_app import app


def test_pages_register_in_preferred_order(monkeypatch):
    monkeypatch.setattr(app, "PAGES", {})

    @app.register_page("Debug")
    def _debug():
        pass

    @app.register_page("Setup / Data Source")
    def _setup():
        pass

    @app.register_page("Service Desk Overview")
    def _overview():
        pass

    assert app.ordered_pages() == ["Service Desk Overview", "Setup / Data Source", "Debug"]
