import sys

from fastapi_static_hello.cli import main

sys.exit(main())
