# test_observability.py

import json
import logging

from observability import JSONFormatter


def test_json_log_line_carries_extra_fields():
    record = logging.LogRecord("main", logging.INFO, __file__, 1, "Rejected calculation", None, None)
    record.error_kind = "NoHeirs"
    line = json.loads(JSONFormatter().format(record))
    assert line["level"] == "INFO"
    assert line["logger"] == "main"
    assert line["message"] == "Rejected calculation"
    assert line["error_kind"] == "NoHeirs"


def test_json_log_line_omits_missing_extras():
    record = logging.LogRecord("main", logging.WARNING, __file__, 1, "plain", None, None)
    line = json.loads(JSONFormatter().format(record))
    assert "error_kind" not in line
    assert "path" not in line
