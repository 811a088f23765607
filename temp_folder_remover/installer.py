"""
Render a systemd unit for the Temp Folder Remover service.

The unit starts automatically at boot (multi-user.target) and runs as root so
it can delete files owned by any user.

Usage:
    python -m temp_folder_remover.installer                  # print unit to stdout
    python -m temp_folder_remover.installer --output /etc/systemd/system/TempFolderRemover.service
"""

import argparse
import sys
from pathlib import Path

from .config import (
    SERVICE_DESCRIPTION,
    SERVICE_DISPLAY_NAME,
    SERVICE_NAME,
)

UNIT_TEMPLATE = """\
[Unit]
Description={display_name} - {description}
After=network.target

[Service]
Type=simple
User={user}
WorkingDirectory={working_directory}
ExecStart={python} -m temp_folder_remover.main
Restart=on-failure
SyslogIdentifier={service_name}

[Install]
WantedBy=multi-user.target
"""


def render_unit(
    working_directory: str, python: str = sys.executable, user: str = "root"
) -> str:
    return UNIT_TEMPLATE.format(
        display_name=SERVICE_DISPLAY_NAME,
        description=SERVICE_DESCRIPTION,
        user=user,
        working_directory=working_directory,
        python=python,
        service_name=SERVICE_NAME,
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Render the systemd unit for {SERVICE_NAME}"
    )
    parser.add_argument("--output", help="Write the unit to this file instead of stdout")
    parser.add_argument(
        "--working-directory",
        default=str(Path.cwd()),
        help="Directory holding settings.env (default: current directory)",
    )
    parser.add_argument("--python", default=sys.executable, help="Python interpreter")
    parser.add_argument("--user", default="root", help="Run-as account")
    args = parser.parse_args(argv)

    unit = render_unit(args.working_directory, python=args.python, user=args.user)

    if args.output:
        Path(args.output).write_text(unit, encoding="utf-8")
        print(f"Wrote {SERVICE_NAME} unit to {args.output}")
        print(f"Enable with: systemctl enable --now {SERVICE_NAME}")
    else:
        sys.stdout.write(unit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
