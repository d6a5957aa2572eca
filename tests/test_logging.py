import io

from listserial import build_list
from listserial.serialization import ListV1Serializer
from listserial.utils import (
    close_logging,
    get_counts,
    init_logging,
    log,
    logDebug,
    logError,
    logWarning,
    print_summary,
)


def test_counts_track_warnings_and_errors(capsys):
    logWarning("odd stream")
    logError("bad stream")
    logError("worse stream")

    assert get_counts() == (2, 1)
    captured = capsys.readouterr()
    assert "Warning: odd stream" in captured.out
    assert "ERROR: bad stream" in captured.err


def test_debug_is_dropped_without_log_file(capsys):
    logDebug("hidden")
    assert capsys.readouterr().out == ""


def test_session_log_file(tmp_path, capsys):
    log_path = tmp_path / "logs" / "session.log"
    init_logging(log_path)
    try:
        log("Copying lists")
        ListV1Serializer(build_list([("a", 0)])).serialize(io.BytesIO())
        logWarning("something odd")
        print_summary()
    finally:
        close_logging()

    content = log_path.read_text(encoding="utf-8")
    assert content.startswith("Session started:")
    assert "Copying lists" in content
    assert "[DEBUG] Serialized V1 list: 1 nodes" in content
    assert "Warning: something odd" in content
    assert "0 Error(s) | 1 Warning(s)" in content
    assert "Session finished:" in content
    assert "SESSION SUMMARY" in capsys.readouterr().out
