"""Core Foundation Functions

Every other module imports from here. Foundation for:
- Error taxonomy (InvalidInput, DegenerateResult)
- Dual hashing (SHA256 + BLAKE3)
- Receipt emission and the optional JSONL ledger
"""

import hashlib
import json
import math
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import blake3

# Ledger is off until a caller opts in with set_ledger_path()
_ledger_path: Optional[Path] = None

# Global receipt counter for ordering
_receipt_counter = 0

# One id per process run, shared by every receipt
_run_id = str(uuid.uuid4())


class EstimationError(Exception):
    """Raised when an estimator cannot produce a finite estimate.

    Never caught silently: the runner turns it into a failed result
    and an anomaly receipt.
    """
    def __init__(self, message: str, method: str = "unknown",
                 parameter: Optional[str] = None):
        self.message = message
        self.method = method
        self.parameter = parameter
        super().__init__(message)


class InvalidInput(EstimationError):
    """A parameter violates a precondition. Raised before any trial runs."""


class DegenerateResult(EstimationError):
    """Trials completed but the estimate formula has a zero denominator."""


def check_count(value, parameter: str, method: str):
    """Require a whole number >= 1 (bool is not a count).

    Raises:
        InvalidInput: If value is not an int or is below 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(
            f"{parameter} must be an integer, got {type(value).__name__} {value!r}",
            method=method, parameter=parameter)
    if value < 1:
        raise InvalidInput(f"{parameter} must be >= 1, got {value}",
                           method=method, parameter=parameter)


def check_length(value, parameter: str, method: str):
    """Require a finite real > 0.

    Raises:
        InvalidInput: If value is not a number, NaN, infinite or <= 0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(
            f"{parameter} must be a number, got {type(value).__name__} {value!r}",
            method=method, parameter=parameter)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput(f"{parameter} must be finite and > 0, got {value}",
                           method=method, parameter=parameter)


def dual_hash(data: bytes | str) -> str:
    """Compute SHA256:BLAKE3 dual hash.

    Args:
        data: Input bytes or string to hash

    Returns:
        String in format "sha256_hex:blake3_hex"
    """
    if isinstance(data, str):
        data = data.encode('utf-8')

    sha256_hash = hashlib.sha256(data).hexdigest()
    blake3_hash = blake3.blake3(data).hexdigest()

    return f"{sha256_hash}:{blake3_hash}"


def emit_receipt(receipt_type: str, data: dict,
                 run_id: Optional[str] = None,
                 to_file: bool = True,
                 silent: bool = True) -> dict:
    """Emit a receipt for one event.

    Args:
        receipt_type: Type of receipt (estimate, anomaly, run_complete, ...)
        data: Receipt payload data
        run_id: Override the process run id
        to_file: Whether to append to the ledger (if one is set)
        silent: Whether to suppress echoing to stderr

    Returns:
        Complete receipt dict with ts, run_id, sequence, payload_hash
    """
    global _receipt_counter
    _receipt_counter += 1

    ts = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')

    receipt = {
        "receipt_type": receipt_type,
        "ts": ts,
        "run_id": run_id or _run_id,
        "sequence": _receipt_counter,
        **data
    }

    # Hash everything except the hash itself
    data_for_hash = {k: v for k, v in receipt.items() if k != "payload_hash"}
    receipt["payload_hash"] = dual_hash(json.dumps(data_for_hash, sort_keys=True))

    receipt_json = json.dumps(receipt, sort_keys=True)

    if not silent:
        print(receipt_json, file=sys.stderr, flush=True)

    if to_file and _ledger_path is not None:
        with open(_ledger_path, "a") as f:
            f.write(receipt_json + "\n")

    return receipt


def verify_receipt(receipt: dict) -> bool:
    """Check that a receipt's payload_hash matches its contents."""
    if "payload_hash" not in receipt:
        return False
    data_for_hash = {k: v for k, v in receipt.items() if k != "payload_hash"}
    return receipt["payload_hash"] == dual_hash(json.dumps(data_for_hash, sort_keys=True))


def emit_failure(e: EstimationError, latency_ms: float = 0.0,
                 silent: bool = True) -> dict:
    """Emit anomaly receipt for a failed estimator.

    Args:
        e: The estimation error that was raised
        latency_ms: Time spent before the failure
        silent: Whether to suppress echoing to stderr

    Returns:
        The anomaly receipt
    """
    return emit_receipt("anomaly", {
        "method": e.method,
        "classification": type(e).__name__,
        "parameter": e.parameter,
        "error": e.message,
        "latency_ms": latency_ms,
        "action": "report"
    }, silent=silent)


def set_ledger_path(path: Optional[Path]):
    """Enable (or, with None, disable) the JSONL ledger."""
    global _ledger_path
    _ledger_path = Path(path) if path is not None else None


def get_ledger_path() -> Optional[Path]:
    """Get the active ledger path, None when disabled."""
    return _ledger_path


def get_run_id() -> str:
    """Get the id stamped on this process's receipts."""
    return _run_id


def load_receipts(file_path: Optional[Path] = None) -> list[dict]:
    """Load all receipts from a ledger file.

    Args:
        file_path: Path to ledger file, defaults to the active ledger

    Returns:
        List of receipt dicts (empty if the file does not exist)
    """
    path = file_path or _ledger_path
    receipts = []

    if path is None:
        return receipts

    try:
        with open(path, 'r') as f:
            for line in f:
                line = line.strip()
                if line:
                    receipts.append(json.loads(line))
    except FileNotFoundError:
        pass

    return receipts


def get_receipt_count() -> int:
    """Get the current receipt counter value."""
    return _receipt_counter


def reset_receipt_counter():
    """Reset the receipt counter (for testing)."""
    global _receipt_counter
    _receipt_counter = 0
