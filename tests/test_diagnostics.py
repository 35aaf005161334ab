"""Tests for structured event diagnostics."""

from __future__ import annotations

import contextlib
import io
import json
import logging
from pathlib import Path
import tempfile
import unittest

import structlog
from structlog.testing import capture_logs

from eventobject.diagnostics import EventDiagnostics, bootstrap, event_fields
from eventobject.events import ActionEvent, Event, ValueChangedEvent
from eventobject.exceptions import ConfigValidationError


class Widget:
    def __str__(self) -> str:
        return "Widget#42"


class EventFieldsTests(unittest.TestCase):
    def test_base_event_fields(self) -> None:
        self.assertEqual(
            event_fields(Event(Widget())),
            {"event_type": "Event", "source": "Widget#42"},
        )

    def test_variant_fields_are_stringified_in_order(self) -> None:
        data = event_fields(ValueChangedEvent(Widget(), "width", 10, None))
        self.assertEqual(
            list(data),
            ["event_type", "source", "property_name", "old_value", "new_value"],
        )
        self.assertEqual(data["old_value"], "10")
        self.assertEqual(data["new_value"], "None")

    def test_absent_source_renders_none(self) -> None:
        self.assertEqual(event_fields(Event(None))["source"], "None")


class EventDiagnosticsTests(unittest.TestCase):
    def test_log_emits_event_observed_entry(self) -> None:
        diagnostics = EventDiagnostics(level="INFO")
        with capture_logs() as entries:
            diagnostics.log(ActionEvent(Widget(), "save"), listener="toolbar")

        self.assertEqual(len(entries), 1)
        entry = entries[0]
        self.assertEqual(entry["event"], "event.observed")
        self.assertEqual(entry["log_level"], "info")
        self.assertEqual(entry["event_type"], "ActionEvent")
        self.assertEqual(
            entry["rendered"],
            "ActionEvent[source=Widget#42, command=save, modifiers=()]",
        )
        self.assertEqual(entry["fields"]["command"], "save")
        self.assertEqual(entry["listener"], "toolbar")

    def test_log_without_fields(self) -> None:
        diagnostics = EventDiagnostics(include_fields=False)
        with capture_logs() as entries:
            diagnostics.log(Event(None))

        self.assertEqual(entries[0]["log_level"], "debug")
        self.assertNotIn("fields", entries[0])
        self.assertEqual(entries[0]["rendered"], "Event[source=None]")

    def test_from_config(self) -> None:
        diagnostics = EventDiagnostics.from_config(
            {"level": "WARNING", "include_fields": False}
        )
        self.assertEqual(diagnostics.level, "warning")
        self.assertFalse(diagnostics.include_fields)

    def test_invalid_level_rejected_at_construction(self) -> None:
        with self.assertRaises(ConfigValidationError):
            EventDiagnostics(level="loud")

    def test_level_is_normalized(self) -> None:
        self.assertEqual(EventDiagnostics(level=" Error ").level, "error")


class BootstrapTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._original_level = root.level
        self._original_handlers = list(root.handlers)

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in root.handlers:
            if handler not in self._original_handlers:
                handler.close()
        root.setLevel(self._original_level)
        root.handlers.clear()
        root.handlers.extend(self._original_handlers)
        structlog.reset_defaults()

    def _write_config(
        self, directory: str, *, level: str, structured: bool, diagnostics_level: str
    ) -> tuple[Path, Path]:
        config_path = Path(directory) / "config.toml"
        log_path = Path(directory) / "events.log"
        config_path.write_text(
            f"""
[logging]
level = "{level}"
structured = {"true" if structured else "false"}
log_to_file = true
log_file_path = "{log_path.as_posix()}"

[diagnostics]
level = "{diagnostics_level}"
            """.strip(),
            encoding="utf-8",
        )
        return config_path, log_path

    def test_bootstrap_applies_config(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.toml"
            config_path.write_text(
                """
[logging]
level = "debug"
structured = false

[diagnostics]
level = "info"
include_fields = false
                """.strip(),
                encoding="utf-8",
            )
            diagnostics = bootstrap(config_path=config_path)

        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        self.assertEqual(diagnostics.level, "info")
        self.assertFalse(diagnostics.include_fields)

    def test_plain_mode_entries_respect_root_level_and_reach_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path, log_path = self._write_config(
                temp_dir, level="ERROR", structured=False, diagnostics_level="debug"
            )
            diagnostics = bootstrap(config_path=config_path)
            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                diagnostics.log(Event("w"))
            self.assertNotIn("event.observed", log_path.read_text(encoding="utf-8"))

            EventDiagnostics(level="ERROR").log(Event("w"))
            content = log_path.read_text(encoding="utf-8")

        self.assertEqual(stdout.getvalue(), "")
        self.assertIn("ERROR eventobject.diagnostics", content)
        self.assertIn("event.observed", content)
        self.assertIn("Event[source=w]", content)

    def test_structured_mode_writes_json_lines_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path, log_path = self._write_config(
                temp_dir, level="INFO", structured=True, diagnostics_level="info"
            )
            bootstrap(config_path=config_path).log(Event("w"))
            lines = log_path.read_text(encoding="utf-8").splitlines()

        self.assertEqual(len(lines), 1)
        record = json.loads(lines[0])
        self.assertEqual(record["event"], "event.observed")
        self.assertEqual(record["level"], "info")
        self.assertEqual(record["rendered"], "Event[source=w]")


if __name__ == "__main__":
    unittest.main()
