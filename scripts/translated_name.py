#!/usr/bin/env python3
"""Translate a sample Arabic name into English. Usage: translated_name.py <user_key>"""

from __future__ import annotations

import sys

from rosette_api.cli import _main

if __name__ == "__main__":
    raise SystemExit(_main(["translated-name", *sys.argv[1:]]))
