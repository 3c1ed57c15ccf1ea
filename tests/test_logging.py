from __future__ import annotations

import io
import json
import logging
import sys
import unittest
from pathlib import Path

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

import cora  # noqa: E402
from cora.logging.factory import CoraLoggerFactory  # noqa: E402
from cora.logging.helpers import (  # noqa: E402
    get_logger,
    is_debug_enabled,
    reset_base_logger,
    setup_base_logger,
)
from cora.logging.sinks import (  # noqa: E402
    ListDebugSink,
    LoggerDebugSink,
    NullDebugSink,
    make_debug_sink,
)


class LoggingTestCase(unittest.TestCase):
    def setUp(self) -> None:
        reset_base_logger()

    def tearDown(self) -> None:
        reset_base_logger()


class HelperTests(LoggingTestCase):
    def test_logger_names_are_namespaced(self) -> None:
        self.assertEqual("cora", get_logger().name)
        self.assertEqual("cora", get_logger("cora").name)
        self.assertEqual("cora.io.walker", get_logger("io.walker").name)
        self.assertEqual("cora.runner", get_logger("cora.runner").name)
        self.assertEqual("cora.coral", get_logger("coral").name)

    def test_plain_text_format(self) -> None:
        buf = io.StringIO()
        setup_base_logger(stream=buf)
        get_logger("io.concat").info("wrote %d bytes", 12)
        self.assertEqual("INFO: wrote 12 bytes\n", buf.getvalue())

    def test_json_format_has_fixed_fields(self) -> None:
        buf = io.StringIO()
        setup_base_logger(json_logs=True, stream=buf)
        get_logger("io.walker").warning("careful", extra={"context": {"path": "a/b"}})
        payload = json.loads(buf.getvalue())
        self.assertEqual("WARNING", payload["level"])
        self.assertEqual("cora.io.walker", payload["module"])
        self.assertEqual("careful", payload["msg"])
        self.assertEqual(cora.__version__, payload["version"])
        self.assertEqual({"path": "a/b"}, payload["ctx"])
        self.assertTrue(payload["ts"].endswith("Z"))

    def test_second_setup_only_changes_level(self) -> None:
        buf = io.StringIO()
        base = setup_base_logger(stream=buf)
        again = setup_base_logger(json_logs=True, level=logging.DEBUG, stream=io.StringIO())
        self.assertIs(base, again)
        self.assertEqual(1, len(base.handlers))
        self.assertEqual(logging.DEBUG, base.level)

    def test_factory_configures_lazily(self) -> None:
        buf = io.StringIO()
        factory = CoraLoggerFactory(debug=True, stream=buf)
        self.assertEqual([], logging.getLogger("cora").handlers)
        factory.get_logger("runner").debug("hello")
        self.assertEqual("DEBUG: hello\n", buf.getvalue())

    def test_factory_debug_sink_follows_debug_flag(self) -> None:
        buf = io.StringIO()
        quiet = CoraLoggerFactory(stream=buf)
        self.assertIsInstance(quiet.debug_sink(), NullDebugSink)
        self.assertEqual(logging.INFO, quiet.level)

        reset_base_logger()
        loud = CoraLoggerFactory(debug=True, stream=buf)
        sink = loud.debug_sink()
        self.assertIsInstance(sink, LoggerDebugSink)
        sink.record("Including a.txt")
        self.assertEqual("DEBUG: Including a.txt\n", buf.getvalue())

    def test_factory_json_mode_carries_context(self) -> None:
        buf = io.StringIO()
        log = CoraLoggerFactory(json_logs=True, stream=buf).get_logger("runner")
        log.info("done", extra={"context": {"files": 3, "bytes": 42}})
        payload = json.loads(buf.getvalue())
        self.assertEqual("cora.runner", payload["module"])
        self.assertEqual({"files": 3, "bytes": 42}, payload["ctx"])

    def test_debug_env_switch(self) -> None:
        from unittest.mock import patch

        with patch.dict("os.environ", {"CORA_DEBUG": "1"}):
            self.assertTrue(is_debug_enabled())
        with patch.dict("os.environ", {"CORA_DEBUG": "0"}):
            self.assertFalse(is_debug_enabled())


class SinkTests(LoggingTestCase):
    def test_logger_sink_emits_at_debug(self) -> None:
        with self.assertLogs("cora.debug", level="DEBUG") as cm:
            LoggerDebugSink().record("Including a.txt")
        self.assertEqual(["DEBUG:cora.debug:Including a.txt"], cm.output)

    def test_logger_sink_ignores_percent_signs(self) -> None:
        with self.assertLogs("cora.debug", level="DEBUG") as cm:
            LoggerDebugSink().record("Including 100%s.txt")
        self.assertEqual(["DEBUG:cora.debug:Including 100%s.txt"], cm.output)

    def test_null_sink_discards(self) -> None:
        self.assertIsNone(NullDebugSink().record("anything"))

    def test_list_sink_keeps_order(self) -> None:
        sink = ListDebugSink()
        sink.record("one")
        sink.record("two")
        self.assertEqual(["one", "two"], sink.lines)

    def test_make_debug_sink(self) -> None:
        self.assertIsInstance(make_debug_sink(True), LoggerDebugSink)
        self.assertIsInstance(make_debug_sink(False), NullDebugSink)


if __name__ == "__main__":
    unittest.main()
