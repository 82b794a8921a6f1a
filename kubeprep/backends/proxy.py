"""Interactive HTTP(S) proxy configuration.

A proxy URL is only persisted once a real fetch through it succeeded.
Persisting means appending export lines to the global shell profile and
setting the same variables in this process so that the package manager and
the Docker install script pick them up.
"""

from __future__ import annotations

import re
import shlex
from collections.abc import Callable
from pathlib import Path

from kubeprep.backends.reachability import http_fetch
from kubeprep.errors import ProxyConfigurationError
from kubeprep.models.config_models import ProvisionConfig
from kubeprep.models.constants import PROXY_VARIABLES
from kubeprep.utils.env import set_env
from kubeprep.utils.logger import Logger
from kubeprep.utils.prompt import ask_text

Fetcher = Callable[..., bool]

_EXPORT_RE = re.compile(r"^\s*export\s+http_proxy=(.+?)\s*$")


def profile_exports(proxy_url: str, no_proxy: str) -> list[str]:
    """Lines appended to the profile; uppercase names alias the lowercase ones.

    Values are shell-quoted, read_profile_proxy() undoes the quoting.
    """
    lines = [f"export {name}={shlex.quote(proxy_url)}" for name in PROXY_VARIABLES]
    lines.append(f"export no_proxy={shlex.quote(no_proxy)}")
    for name in (*PROXY_VARIABLES, "no_proxy"):
        lines.append(f'export {name.upper()}="${name}"')
    return lines


def read_profile_proxy(profile: Path) -> str | None:
    """Return the last http_proxy exported by the profile, if any."""
    if not profile.exists():
        return None
    found = None
    for line in profile.read_text().splitlines():
        match = _EXPORT_RE.match(line)
        if not match:
            continue
        try:
            words = shlex.split(match.group(1))
        except ValueError:
            continue
        if len(words) == 1:
            found = words[0]
    return found


class ProxyConfigurator:
    """Ask for a proxy, test it, persist it, and check the persisted result."""

    def __init__(self, config: ProvisionConfig, fetch: Fetcher = http_fetch) -> None:
        self._config = config
        self._fetch = fetch

    def test_proxy(self, proxy_url: str) -> bool:
        """Fetch the probe URL through proxy_url."""
        return self._fetch(
            self._config.probe_url, self._config.http_timeout, proxy=proxy_url
        )

    def ask_working_proxy(self) -> str:
        """Prompt until a proxy passes the trial fetch.

        Raises:
            ProxyConfigurationError: When max_proxy_attempts proxies failed.
        """
        log = Logger.get("proxy")
        attempts = self._config.max_proxy_attempts
        for attempt in range(1, attempts + 1):
            proxy_url = ask_text(
                "Give me your proxy URL",
                validate=lambda answer: bool(answer),
                error_message="The proxy URL cannot be empty",
                max_attempts=self._config.max_prompt_attempts,
            )
            log.info("Testing proxy")
            if self.test_proxy(proxy_url):
                log.info("Proxy is working")
                return proxy_url
            if attempt < attempts:
                log.warning("Proxy is not working. Retry...")

        raise ProxyConfigurationError(f"No working proxy after {attempts} attempt(s)")

    def persist(self, proxy_url: str) -> None:
        """Append the exports to the profile and apply them to this process."""
        log = Logger.get("proxy")
        log.info("Injecting global env var in profile")

        profile = self._config.paths.profile
        profile.parent.mkdir(parents=True, exist_ok=True)
        with profile.open("a") as f:
            f.write("\n".join(profile_exports(proxy_url, self._config.no_proxy)) + "\n")

        for name in PROXY_VARIABLES:
            set_env(name, proxy_url, log=True)
            set_env(name.upper(), proxy_url, log=True)
        set_env("no_proxy", self._config.no_proxy, log=True)
        set_env("NO_PROXY", self._config.no_proxy, log=True)

    def verify(self) -> None:
        """Fetch through the proxy the profile now exports.

        Raises:
            ProxyConfigurationError: If the profile has no proxy or the fetch fails.
        """
        log = Logger.get("proxy")
        log.info("Configuration done")
        log.info("Testing proxy")
        persisted = read_profile_proxy(self._config.paths.profile)
        if persisted is None or not self.test_proxy(persisted):
            raise ProxyConfigurationError("Shell profile proxy configuration failed")
        log.info("We now have access to the internet")

    def configure(self) -> str:
        """Run the whole interactive configuration.

        Returns:
            The configured proxy URL.

        Raises:
            ProxyConfigurationError: If no proxy worked or verification failed.
        """
        Logger.get("proxy").info("Going to configure proxy")
        proxy_url = self.ask_working_proxy()
        self.persist(proxy_url)
        self.verify()
        return proxy_url
