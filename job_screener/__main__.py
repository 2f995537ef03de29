"""
Main entry point for the job_screener package.

Usage:
    python -m job_screener [command] [options]

See 'python -m job_screener --help' for available commands.
"""

from job_screener.cli import main

if __name__ == "__main__":
    main()
