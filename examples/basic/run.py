"""
Minimal Working Example: print the first outputs of a generator.

Usage:
    python examples/basic/run.py
"""

import msws

seed = 0xB5AD4ECEDA1CE2A9

if __name__ == "__main__":
    r = msws.Rand(seed)
    for i in range(10):
        print(f"{i}: {r.rand()}")
