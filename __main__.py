"""CLI shim for running harsh directly from the repository checkout."""

from harsh.cli import main
from harsh.codec import Harsh
from harsh.builder import HarshBuilder

__all__ = ["Harsh", "HarshBuilder", "main"]


if __name__ == "__main__":
    main()
