"""
Tests for the structured logging helpers.
"""
import json
import logging

from skumatch.services.system.logger_service import (
    ConsoleFormatter,
    JSONFormatter,
    _infer_service,
    get_logger,
    log_error,
    log_match_operation,
    log_request,
)

logger = get_logger("skumatch.tests.test_logging")


def make_record(name="skumatch.features.matching.service.match_service", msg="SKU match", **extra):
    record = logging.LogRecord(name, logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields_and_extras():
    record = make_record(sku_code="OKFSZGRA", alternatives=["OKFSZPEA"], flavor="샤인머스캣")
    data = json.loads(JSONFormatter().format(record))

    assert data['level'] == 'INFO'
    assert data['message'] == 'SKU match'
    assert data['component'] == 'skumatch'
    assert data['service'] == 'matching'
    assert data['sku_code'] == 'OKFSZGRA'
    assert data['alternatives'] == ['OKFSZPEA']
    assert data['flavor'] == '샤인머스캣'


def test_json_formatter_stringifies_unserializable_extras():
    record = make_record(payload={1, 2})
    data = json.loads(JSONFormatter().format(record))
    assert isinstance(data['payload'], str)


def test_json_formatter_keeps_non_ascii_readable():
    output = JSONFormatter().format(make_record(msg="샤인머스캣"))
    assert "샤인머스캣" in output


def test_console_formatter_appends_extras():
    line = ConsoleFormatter().format(make_record(sku_code="LOWHEKIC"))
    assert "SKU match | sku_code=LOWHEKIC" in line
    assert "[skumatch.features.matching.service.match_service]" in line


def test_infer_service():
    assert _infer_service("skumatch.features.audit.service.audit_service") == "audit"
    assert _infer_service("skumatch.services.system.security") == "system"
    assert _infer_service("werkzeug") == "werkzeug"
    assert _infer_service("") == "unknown"


def test_log_match_operation(caplog):
    with caplog.at_level(logging.INFO):
        log_match_operation(logger, sku_code="OKFSZGRA", score=0.894444,
                            alternatives=["OKFSMUSC", "OKFSZPEA"], ocr_chars=42)

    record = caplog.records[-1]
    assert record.getMessage() == "SKU match"
    assert record.operation == "MATCH"
    assert record.sku_code == "OKFSZGRA"
    assert record.score == 0.8944
    assert record.alternatives == ["OKFSMUSC", "OKFSZPEA"]
    assert record.ocr_chars == 42


def test_log_request(caplog):
    with caplog.at_level(logging.INFO):
        log_request(logger, "POST", "/api/ocr-match", request_id="req-1", request_status=200)

    record = caplog.records[-1]
    assert record.getMessage() == "POST /api/ocr-match"
    assert record.request_id == "req-1"
    assert record.request_status == 200


def test_log_error_carries_type_and_traceback(caplog):
    try:
        raise ValueError("catalog broken")
    except ValueError as e:
        with caplog.at_level(logging.ERROR):
            log_error(logger, e, {"context": "loading catalog"})

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.error_type == "ValueError"
    assert record.error_message == "catalog broken"
    assert record.context == "loading catalog"
    assert record.exc_info is not None
