"""Requesting a token from an unconfigured session must crash the program."""

import os
import subprocess
import sys
import textwrap
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[2] / "src"

SCRIPT = textwrap.dedent(
    """
    import asyncio

    from applepay_tokenizer import (
        PaymentAuthorization,
        PaymentMethod,
        PaymentToken,
        StripeSession,
    )

    payment = PaymentAuthorization(
        token=PaymentToken(
            payment_data=b"{}",
            payment_method=PaymentMethod(),
            transaction_identifier="txn_1",
        )
    )

    asyncio.run(StripeSession().create_token(payment))
    print("unreachable")
    """
)


def test_unconfigured_session_terminates_process():
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

    result = subprocess.run(
        [sys.executable, "-c", SCRIPT],
        capture_output=True,
        text=True,
        timeout=60,
        env=env,
    )

    assert result.returncode != 0
    assert "SessionNotConfigured" in result.stderr
    assert "unreachable" not in result.stdout
