"""Tests for application assembly and logging setup."""

import logging

from fastapi.testclient import TestClient

from user_query_api.app.core.logging_config import setup_logging
from user_query_api.app.core.store import UserStore
from user_query_api.app.main import app, create_app
from user_query_api.app.schemas.user import User


def test_default_app_uses_builtin_seed():
    assert len(app.state.user_store) == 2
    with TestClient(app) as client:
        response = client.post("/gql", json={"query": "{ getUsers { name } }"})
    assert response.json() == {"data": {"getUsers": [{"name": "Alice"}, {"name": "Bob"}]}}


def test_injected_store_is_used():
    store = UserStore([User(id="x", name="Xavier", email="x@example.com")])
    application = create_app(store)
    assert application.state.user_store is store
    with TestClient(application) as client:
        response = client.post("/gql", json={"query": '{ getUser(id: "x") { email } }'})
    assert response.json() == {"data": {"getUser": {"email": "x@example.com"}}}


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        before = list(root.handlers)
        setup_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)


def test_setup_logging_writes_to_log_file(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    root.handlers = []
    logfile = tmp_path / "service.log"
    try:
        setup_logging("INFO", str(logfile))
        file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert root.level == logging.INFO
        logging.getLogger("user_query_api.test").info("hello from the store")
        file_handlers[0].flush()
        assert "[INFO] user_query_api.test: hello from the store" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
