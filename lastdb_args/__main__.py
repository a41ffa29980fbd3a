#!/usr/bin/env python
from lastdb_args.cli import LastdbCLI

"""
lastdb_args

Interprets the lastdb command line: options, the database output name and
the list of sequence files that follows it.
"""

def main():
    cli = LastdbCLI()
    cli.run()

if __name__ == "__main__":
    main()
