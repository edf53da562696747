import logging

from vault.logging import log_file_op, redact_args


def test_redact_args_hides_bodies_and_emails():
    safe = redact_args(
        {
            "filePath": "people/jane@example.com.md",
            "content": "secret body",
            "templatePath": None,
            "append": True,
            "variables": {"b": "1", "a": "2"},
        }
    )
    assert safe == {
        "filePath": "people/[redacted-email]",
        "content": "<11 chars>",
        "append": True,
        "variables": ["a", "b"],
    }


def test_log_file_op(caplog):
    logger = logging.getLogger("vault.test")
    with caplog.at_level(logging.INFO, logger="vault.test"):
        log_file_op(logger, "write", {"filePath": "a.md", "content": "xyz"})
    assert "file_op write" in caplog.text
    assert "xyz" not in caplog.text
