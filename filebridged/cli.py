"""filebridge CLI for cross-platform daemon management.

Provides simple commands to start, stop, and inspect the filebridged daemon.
"""

import contextlib
import os
import subprocess
import sys
import time
from pathlib import Path

import click
import psutil

from filebridge_library.config.loader import get_config_path
from filebridge_library.config.loader import load_config
from filebridge_library.storage.paths import get_daemon_log_path


def find_daemon_processes() -> list[psutil.Process]:
    """Find all running daemon processes.

    Looks for processes matching 'python -m filebridged' pattern.
    Excludes the CLI itself and verifies processes are alive.

    Returns:
        List of daemon Process objects
    """
    current_pid = psutil.Process().pid
    daemon_processes = []

    for proc in psutil.process_iter(["pid", "cmdline", "status"]):
        try:
            if proc.info["pid"] == current_pid:
                continue

            if proc.info["status"] in (psutil.STATUS_ZOMBIE, psutil.STATUS_DEAD):
                continue

            cmdline = proc.info["cmdline"]
            if not cmdline or len(cmdline) < 2:
                continue

            # Match pattern: python -m filebridged
            is_python = "python" in Path(cmdline[0]).name.lower()
            if not is_python or "-m" not in cmdline:
                continue

            module_index = cmdline.index("-m") + 1
            if module_index < len(cmdline) and cmdline[module_index] == "filebridged" and proc.is_running():
                daemon_processes.append(proc)

        except (psutil.NoSuchProcess, psutil.AccessDenied, ValueError, IndexError):
            continue

    return daemon_processes


def get_daemon_status() -> tuple[bool, int | None]:
    """Check if daemon is running.

    Returns:
        Tuple of (is_running, pid)
    """
    processes = find_daemon_processes()
    if processes:
        return True, processes[0].pid
    return False, None


def stop_process(proc: psutil.Process, name: str, timeout: int = 5) -> bool:
    """Stop a process gracefully.

    Args:
        proc: Process to stop
        name: Process name for logging
        timeout: Seconds to wait before force kill

    Returns:
        True if stopped successfully
    """
    try:
        click.echo(f"Stopping {name} (PID {proc.pid})...")
        proc.terminate()

        try:
            proc.wait(timeout=timeout)
            click.echo(f"{name} stopped successfully")
            return True
        except psutil.TimeoutExpired:
            click.echo(f"{name} did not stop gracefully, force killing...")
            proc.kill()
            proc.wait(timeout=2)
            click.echo(f"{name} force killed")
            return True

    except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
        click.echo(f"Failed to stop {name}: {e}", err=True)
        return False


@click.group()
def cli():
    """filebridge - Remote file browser daemon management."""
    pass


@cli.command()
@click.option("--root", type=click.Path(exists=True, file_okay=False), help="Directory to expose (overrides config)")
def start(root: str | None):
    """Start the daemon in the background."""
    daemon_running, daemon_pid = get_daemon_status()
    if daemon_running:
        click.echo(f"Daemon already running (PID {daemon_pid})")
        return

    daemon_log = get_daemon_log_path()

    env = None
    if root:
        env = {**os.environ, "FILEBRIDGE_ROOT_PATH": str(Path(root).resolve())}

    click.echo("Starting daemon...")
    with open(str(daemon_log), "a") as log_file:
        subprocess.Popen(
            [sys.executable, "-m", "filebridged"],
            stdout=log_file,
            stderr=log_file,
            start_new_session=True,
            env=env,
        )

    for _ in range(10):
        time.sleep(0.5)
        daemon_running, daemon_pid = get_daemon_status()
        if daemon_running:
            click.echo(f"Daemon started (PID {daemon_pid}, logs: {daemon_log})")
            break
    else:
        click.echo("Warning: Daemon may not have started successfully", err=True)


@cli.command()
def stop():
    """Stop the daemon."""
    daemon_processes = find_daemon_processes()
    if not daemon_processes:
        click.echo("Daemon not running")
        return

    for proc in daemon_processes:
        stop_process(proc, "daemon")


@cli.command()
@click.option("--root", type=click.Path(exists=True, file_okay=False), help="Directory to expose (overrides config)")
@click.pass_context
def restart(ctx, root: str | None):
    """Restart the daemon."""
    click.echo("Restarting daemon...")
    ctx.invoke(stop)
    time.sleep(2)
    ctx.invoke(start, root=root)


@cli.command()
def status():
    """Show running status and configuration."""
    daemon_running, daemon_pid = get_daemon_status()
    settings = load_config()

    click.echo("filebridge Status:")
    click.echo("-" * 40)

    if daemon_running:
        click.echo(f"Daemon:  ✓ Running (PID {daemon_pid})")
        click.echo(f"URL:     http://{settings.host}:{settings.port}")
    else:
        click.echo("Daemon:  ✗ Not running")

    click.echo(f"Root:    {settings.root_path}")
    click.echo(f"Config:  {get_config_path()}")


def show_log_file(log_file: Path, lines: int, follow: bool = False):
    """Display log file contents.

    Args:
        log_file: Path to log file
        lines: Number of lines to show
        follow: Whether to follow log output (like tail -f)
    """
    if not log_file.exists():
        click.echo(f"No logs found at {log_file}")
        return

    if follow:
        with contextlib.suppress(KeyboardInterrupt):
            subprocess.run(["tail", "-f", str(log_file)])
    else:
        with open(log_file) as f:
            all_lines = f.readlines()
            for line in all_lines[-lines:]:
                click.echo(line.rstrip())


@cli.command()
@click.option("-f", "--follow", is_flag=True, help="Follow log output (like tail -f)")
@click.option("-n", "--lines", default=50, help="Number of lines to show")
def logs(follow: bool, lines: int):
    """View daemon logs."""
    show_log_file(get_daemon_log_path(), lines, follow)


def main():
    """Entry point for filebridge CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted")
        sys.exit(0)


if __name__ == "__main__":
    main()
