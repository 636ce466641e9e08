#!/usr/bin/env python3
import os
import signal
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def spawn_api() -> subprocess.Popen:
    command = [
        sys.executable,
        '-m',
        'uvicorn',
        'company_settings.main:app',
        '--host',
        os.environ.get('HOST', '0.0.0.0'),
        '--port',
        os.environ.get('PORT', '8001'),
        '--reload',
    ]
    return subprocess.Popen(command, cwd=str(ROOT), env=os.environ.copy())


def terminate(process: subprocess.Popen) -> None:
    if process.poll() is None:
        process.terminate()
    time.sleep(1)
    if process.poll() is None:
        process.kill()


def main() -> int:
    process = spawn_api()

    def handle_signal(_sig: int, _frame: object) -> None:
        terminate(process)
        raise SystemExit(0)

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    while process.poll() is None:
        time.sleep(0.5)
    return process.returncode or 0


if __name__ == '__main__':
    raise SystemExit(main())
