"""
Zaqar - A log scanner that reports matched lines per log file.

This package reads one or more log files to end-of-stream, runs every
line through a set of configured matchers in parallel, and sends one
aggregated report per log through a notifier such as Mailgun.
"""

__version__ = "0.1.0"
