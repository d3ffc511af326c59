"""Tests for logging helpers."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

from rpcmarshal import configure_logging, get_logger
from rpcmarshal import log as rpc_log

SRC = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture
def restore_logging():
    """Undo configure_logging() side effects on structlog and the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    rpc_log._handler = None
    structlog.reset_defaults()


class TestLogging:
    """Test logging configuration entry points."""

    def test_rejects_unknown_format(self) -> None:
        """Test an unsupported renderer name is refused."""
        with pytest.raises(ValueError, match="Unsupported log format"):
            configure_logging(fmt="xml")

    def test_get_logger_binds(self) -> None:
        """Test get_logger() returns a logger that supports bind()."""
        logger = get_logger("rpcmarshal.test")
        assert logger.bind(request="1") is not None

    def test_reconfigure_replaces_handler(self, restore_logging: None) -> None:
        """Test calling configure_logging() twice leaves one installed handler."""
        before = len(logging.getLogger().handlers)
        configure_logging(level="DEBUG")
        configure_logging(level="INFO", fmt="json")
        root = logging.getLogger()
        assert len(root.handlers) == before + 1
        assert rpc_log._handler in root.handlers
        assert root.level == logging.INFO

    def test_silent_until_configured(self) -> None:
        """Test importing and marshalling writes nothing without configuration."""
        code = (
            "import rpcmarshal\n"
            "from rpcmarshal import RecordCodecs, ConversionError, marshal\n"
            "class Broken: pass\n"
            "RecordCodecs.register(Broken, lambda b: b.missing)\n"
            "marshal(object())\n"
            "RecordCodecs.clear()\n"
            "RecordCodecs.register(Broken, lambda b: b.missing)\n"
            "try:\n"
            "    marshal(Broken())\n"
            "except ConversionError:\n"
            "    pass\n"
        )
        env = dict(os.environ)
        env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(SRC), env.get("PYTHONPATH")]),
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        assert result.stdout == ""
        assert result.stderr == ""
