#!/usr/bin/env python3
"""
LinkedIn Connections Crawler

Walks the 1st-degree connections of one LinkedIn profile page by page,
stores every connection once in a CSV table, and collects public contact
emails into a second table. Reruns resume from what the tables hold.

Usage:
  python main.py https://www.linkedin.com/in/<handle>/
"""

import sys

import cli


def main():
    """Single-argument entry point; see ``cli.py crawl`` for options."""
    cli.main(["crawl"] + sys.argv[1:2])


if __name__ == '__main__':
    main()
