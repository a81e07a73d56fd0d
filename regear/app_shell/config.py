import logging
import os
import sys
from pathlib import Path

from regear.rules.models import Rules

logger = logging.getLogger(__name__)


def validate_ops_rules(rules: Rules, data_dir: Path) -> None:
    """
    Validate operational requirements before startup.
    """
    ops = rules.ops

    # 1. Data dir must exist and be writable for the database
    data_dir.mkdir(parents=True, exist_ok=True)
    if not os.access(data_dir, os.W_OK):
        logger.critical(f"Data directory {data_dir} is not writable")
        sys.exit(1)

    # 2. Check Required Env
    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        logger.critical(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)

    # 3. Roster file is optional; members list is empty without it
    roster_path = data_dir / rules.members.roster_csv
    if not roster_path.exists():
        logger.warning(f"Roster file {roster_path} not found; member list will be empty")

    logger.info("Configuration Validated.")
