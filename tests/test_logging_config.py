import json
import logging

from etherscan_async.config import settings
from etherscan_async.logging_config import JsonFormatter, RequestFormatter, configure_logging, logger


def _record(**extra):
    record = logging.LogRecord("etherscan_async.dispatcher", logging.INFO, __file__, 10, "GET %s", ("stats/ethprice",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_outputs_json():
    output = json.loads(JsonFormatter().format(_record()))

    assert output["level"] == "INFO"
    assert output["message"] == "GET stats/ethprice"
    assert output["logger"] == "etherscan_async.dispatcher"


def test_json_formatter_merges_props():
    output = json.loads(JsonFormatter().format(_record(props={"event": "request", "module": "stats"})))

    assert output["event"] == "request"
    assert output["module"] == "stats"


def test_request_formatter_appends_context():
    line = RequestFormatter().format(_record(props={"module": "stats", "action": "ethprice", "event": "request"}))

    assert line.endswith("GET stats/ethprice [module=stats action=ethprice event=request]")


def test_request_formatter_without_context():
    assert RequestFormatter().format(_record()).endswith("GET stats/ethprice")


def test_configure_logging_json():
    settings.log_json = True
    settings.log_level = "debug"
    try:
        configure_logging()
        configure_logging()

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JsonFormatter)
        assert logger.level == logging.DEBUG
    finally:
        settings.log_json = False
        settings.log_level = "INFO"
        configure_logging()

    assert isinstance(logger.handlers[0].formatter, RequestFormatter)
