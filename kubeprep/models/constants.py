"""Constants for kubeprep models and commands."""

from enum import IntEnum, StrEnum, auto


class InterfaceState(StrEnum):
    """Administrative state of a network interface."""

    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


class Reachability(StrEnum):
    """Internet reachability classification of an interface."""

    UNKNOWN = auto()
    REACHABLE = auto()
    UNREACHABLE = auto()


class CheckStatus(StrEnum):
    """Outcome of a single reachability check."""

    PASSED = auto()
    FAILED = auto()
    SKIPPED = auto()


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    FAILURE = 1
    NO_CONNECTIVITY = 2


# Interface discovery
EXCLUDED_INTERFACE_PREFIXES = ("lo", "br-", "virbr", "docker", "veth")
DHCP_INTERFACE_PREFIX = "enp"

# Reachability probing
PUBLIC_PROBE_ADDRESS = "8.8.8.8"
DEFAULT_PROBE_URL = "http://google.fr"
LOCAL_LINK_TIMEOUT_SECONDS = 1
INTERNET_TIMEOUT_SECONDS = 2
HTTP_TIMEOUT_SECONDS = 3.0

# Proxy configuration
DEFAULT_NO_PROXY = "localhost,127.0.0.0/8,10.0.0.0/8,172.16.0.0/12,192.168.0.0/16"
PROXY_VARIABLES = ("http_proxy", "https_proxy", "ftp_proxy")

# Interactive retries
DEFAULT_PROMPT_ATTEMPTS = 5
DEFAULT_PROXY_ATTEMPTS = 3

# Kubernetes tooling
DEFAULT_K8S_VERSION = "1.30"
KUBE_PACKAGES = ("kubelet", "kubeadm", "kubectl")
BASE_APT_PACKAGES = ("apt-transport-https", "ca-certificates", "curl", "gnupg")
DOCKER_INSTALL_URL = "https://get.docker.com"
POD_NETWORK_CIDR = "192.168.0.0/16"

# RFC 1123 host name, dot-separated labels
HOSTNAME_PATTERN = (
    r"^(([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9\-]*[a-zA-Z0-9])\.)*"
    r"([A-Za-z0-9]|[A-Za-z0-9][A-Za-z0-9\-]*[A-Za-z0-9])$"
)
