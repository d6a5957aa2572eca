# listserial utilities
from .logging import (
    log, logWarning, logError, logDebug,
    init_logging, close_logging, print_summary, get_counts, reset_counts,
)
from .binary import (
    encode_int32, decode_int32,
    write_int32, write_null, write_optional_int32, write_text,
)
