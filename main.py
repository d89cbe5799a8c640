import sys

# lambda_handler is re-exported for the Lambda runtime
from bpreads.cli import lambda_handler, main  # noqa: F401

if __name__ == "__main__":
    sys.exit(main())
