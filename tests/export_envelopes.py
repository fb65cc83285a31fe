#!/usr/bin/env python3
"""Export Python-generated envelopes for cross-implementation testing."""

import json
from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from privatebox.crypto import encrypt
from privatebox.keys import derive_keys_from_seed
from test_vectors import ALICE_SEED_HEX, BOB_SEED_HEX, TEST_MESSAGES


def main() -> None:
    """Export all test envelopes as JSON vector files."""
    output_dir = Path(__file__).parent.parent.parent / "private-box-vectors" / "envelopes-python"
    output_dir.mkdir(parents=True, exist_ok=True)

    alice_secret, alice_public = derive_keys_from_seed(bytes.fromhex(ALICE_SEED_HEX))
    bob_secret, bob_public = derive_keys_from_seed(bytes.fromhex(BOB_SEED_HEX))

    print(f"Exporting {len(TEST_MESSAGES)} test envelopes to {output_dir}")

    for key, message in TEST_MESSAGES.items():
        envelope = encrypt(message, [alice_public, bob_public])

        vector = {
            "plaintext": message.hex(),
            "envelope": envelope.hex(),
            "secret_keys": [alice_secret.hex(), bob_secret.hex()],
        }

        output_file = output_dir / f"{key}.json"
        output_file.write_text(json.dumps(vector, indent=2))

        print(f"  {key}: {len(envelope)} bytes")

    print(f"\nExported {len(TEST_MESSAGES)} envelopes to {output_dir}")


if __name__ == "__main__":
    main()
