"""Allow running tolgee-puller with ``python -m tolgee_puller``."""

from . import main

main()
