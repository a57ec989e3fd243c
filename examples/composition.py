# /// script
# requires-python = ">=3.10"
# dependencies = []
# ///
"""Composing containers.

This example shows:
- Option and Result chains with inline validation
- IO and Future steps that only run on get()
- Fusing IO into Option with compose_m / io_some
- Lifting a record of functions into IO

Run with: uv run python examples/composition.py
"""

import logging
from dataclasses import dataclass

from purify import IO, Future, Result, err, from_nullable, io_nothing, io_some, lift, ok

# =============================================================================
# Domain Models
# =============================================================================


@dataclass
class Order:
    sku: str
    quantity: int


USERS = {1: {"name": "Ada", "email": "ADA@EXAMPLE.COM"}, 2: {"name": "Bob"}}


# =============================================================================
# Option: safe lookups
# =============================================================================


def email_for(user_id: int) -> str:
    return (
        from_nullable(USERS.get(user_id))
        .map(lambda user: user.get("email"))
        .map(str.lower)
        .get_or_else(lambda: "<no email>")
    )


# =============================================================================
# Result: validation without exceptions
# =============================================================================


def validate(order: Order) -> Result[str, str]:
    return (
        ok(order)
        .map(lambda o: o if o.quantity > 0 else err(f"{o.sku}: quantity must be positive"))
        .map(lambda o: o if o.sku.isalnum() else err(f"{o.sku}: bad sku"))
        .map(lambda o: f"{o.quantity} x {o.sku}")
    )


# =============================================================================
# IO / Future: describe now, run later
# =============================================================================


def build_report() -> IO[str]:
    return (
        IO.of(lambda: [email_for(uid) for uid in USERS])
        .map(lambda emails: ", ".join(emails))
        .map(lambda line: f"emails: {line}")
    )


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")

    print("Option")
    print("  user 1:", email_for(1))
    print("  user 2:", email_for(2))
    print("  user 3:", email_for(3))

    print("Result")
    for order in [Order("A1", 2), Order("A1", 0), Order("a-1", 1)]:
        outcome = validate(order)
        if outcome.is_ok():
            print("  ok: ", outcome.get())
        else:
            print("  err:", outcome.get().error)

    print("IO")
    report = build_report()
    print("  built, nothing ran yet")
    print(" ", report.get())

    print("Future")
    print("  fold:", Future.new(2, [lambda x: x + 1, lambda x: x * 3]).get())

    print("Fusion")
    print("  io_some:", io_some(20).map(lambda x: x + 1).map(lambda x: x * 2).get())
    print("  io_nothing:", io_nothing().map(lambda x: x + 1).get())

    print("Lifting")
    pure = lift(IO.of)({"add": lambda a, b: a + b, "version": "1.0"})
    print("  lifted keys:", sorted(pure))
    print("  add(2, 3):", pure["add"](2, 3).get())


if __name__ == "__main__":
    main()
