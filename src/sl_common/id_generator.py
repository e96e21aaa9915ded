"""Reference generator for paired ledger records (credit transfers, corrections).

Not globally ordered; only unique enough to tie two records together.
"""

import uuid


def generate_reference(prefix: str) -> str:
    """Generate an opaque reference such as 'transfer-1a2b3c4d5e6f'."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
