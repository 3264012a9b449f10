"""Allow ``python -m rpkgdev``"""

from .cli.main import main

main()
