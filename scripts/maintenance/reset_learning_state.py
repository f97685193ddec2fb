"""
Reset the learner state (XP, history and every word).

DANGEROUS: This deletes all progress!
The starter vocabulary is seeded again the next time the app starts.

Usage:
    python -m scripts.maintenance.reset_learning_state
"""

from core.controller import LabController
from core.logging_config import configure_logging
from core.vocab import StateGateway, ResetNotConfirmedError


def main():
    configure_logging()
    gateway = StateGateway()

    print("=" * 60)
    print("WARNING: Reset Learner State")
    print("=" * 60)
    print()
    print(f"Database: {gateway.database_url}")
    print(f"Slot:     {gateway.slot}")
    print()
    print("This will DELETE all progress:")
    print("  - XP and XP history")
    print("  - All known and learning words with their mastery")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    lab = LabController(gateway, starter_vocab=())
    try:
        lab.reset(confirmed=response.lower() == "yes")
    except ResetNotConfirmedError:
        print("\nCancelled. No changes made.")
        return

    print("\n✓ Learner state reset complete!")


if __name__ == "__main__":
    main()
