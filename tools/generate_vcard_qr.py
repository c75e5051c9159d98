#!/usr/bin/env python3
"""
generate_vcard_qr.py

Create a vCard (VCF) file and save it as an SVG QR code image (offline).

Same as the `vcard-builder` console script; run with --help for options.

Usage example:
  python generate_vcard_qr.py --first-name Alice --last-name Example --vcf alice.vcf --out-svg alice_qr.svg

Requires: the vcard-builder package (pip install -e .)
"""
import sys

from vcard_builder.cli import main

if __name__ == "__main__":
    sys.exit(main())
