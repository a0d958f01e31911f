# src/simpleswap/__main__.py
import sys

from simpleswap.app import main

sys.exit(main())
