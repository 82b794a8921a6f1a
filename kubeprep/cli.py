#!/usr/bin/env python3
"""kubeprep CLI - prepare this host for kubeadm."""

import click
from pydantic import ValidationError

from kubeprep.commands.provision_cmd import run_provision
from kubeprep.errors import KubeprepError
from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.constants import ExitCode
from kubeprep.utils.env import get_env
from kubeprep.utils.logger import Logger


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "show_version", is_flag=True, help="Show version and exit.")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging; detailed --version.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Log level (default: $KUBEPREP_LOG_LEVEL or INFO).",
)
@click.option("--user", default=None, help="User to add to the docker group (default: $SUDO_USER).")
@click.option(
    "--home",
    type=click.Path(file_okay=False),
    default=None,
    help="Home directory receiving the completion setup.",
)
@click.option("--shell", default=None, help="Shell name for completion (default: basename of $SHELL).")
@click.option("--k8s-version", default=None, help="Kubernetes minor version, e.g. 1.30.")
@click.option("--hostname", default=None, help="New host name (prompted when omitted).")
@click.option("--upgrade", is_flag=True, help="Upgrade installed packages first.")
@click.option("--no-reboot", is_flag=True, help="Do not reboot at the end.")
@click.option("--skip-dhcp", is_flag=True, help="Do not offer to force DHCP on enp* interfaces.")
@click.option("--scan-only", is_flag=True, help="Only report network connectivity, then exit.")
@click.pass_context
def kubeprep(
    ctx,
    show_version,
    verbose,
    log_level,
    user,
    home,
    shell,
    k8s_version,
    hostname,
    upgrade,
    no_reboot,
    skip_dhcp,
    scan_only,
):
    r"""Configure this host to run kubeadm: network and proxy checks,
    Docker, Kubernetes packages, swap, host name, then reboot.

    \b
    Examples:
      sudo kubeprep                          # Interactive provisioning
      sudo kubeprep --hostname node-1 --no-reboot
      kubeprep --scan-only                   # Connectivity report only
    """
    if show_version:
        from kubeprep.commands.version_cmd import run_version

        run_version(verbose=verbose)
        return

    if not Logger.is_configured():
        Logger.configure(
            level=log_level or get_env("KUBEPREP_LOG_LEVEL", default="INFO"),
            timestamps=False,
        )
    if verbose:
        Logger.set_level("DEBUG")
    elif log_level:
        Logger.set_level(log_level)

    try:
        config = ProvisionConfig.from_environment(
            user=user,
            home=home,
            shell=shell,
            k8s_version=k8s_version,
            hostname=hostname,
            upgrade=upgrade,
            reboot=not no_reboot,
            ask_dhcp=not skip_dhcp,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    log = Logger.get()
    try:
        code = run_provision(config, scan_only=scan_only)
    except KubeprepError as e:
        log.error(str(e))
        ctx.exit(ExitCode.FAILURE)
    ctx.exit(code)


def main():
    kubeprep()


if __name__ == "__main__":
    main()
