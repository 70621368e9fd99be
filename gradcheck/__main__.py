"""Allow running as: python -m gradcheck"""

from .cli import main

raise SystemExit(main())
