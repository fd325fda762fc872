# Copyright (c) Meta Platforms, Inc. and affiliates.

"""
Allow running tracetool as a module: python -m tracetool
"""

from tracetool.cli import main

if __name__ == "__main__":
    main()
