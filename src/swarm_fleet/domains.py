"""Domain pattern table for recommending specialists from task text."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from swarm_fleet.catalog import SPECIALIST_PREFIX


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in patterns)


# Declaration order is significant: match_domains() reports in this order,
# and specialists are assembled in this order.
DOMAIN_PATTERNS: Mapping[str, tuple[re.Pattern[str], ...]] = MappingProxyType({
    "windows": _compile(
        r"\bwindows\b", r"\bwin32\b", r"\bregistry\b", r"\bregedit\b", r"\bwmi\b", r"\bcim\b",
        r"\bservice\b", r"\bevent\s*log\b", r"\bscheduled\s*task\b", r"\bgpo\b",
        r"\bgroup\s*policy\b", r"\bmsi\b", r"\binstaller\b", r"\bwinrm\b",
    ),
    "powershell": _compile(
        r"\bpowershell\b", r"\bpwsh\b", r"\bps1\b", r"\bcmdlet\b", r"\bget-\w+", r"\bset-\w+",
        r"\bnew-\w+", r"\bremove-\w+", r"\binvoke-\w+", r"\bpester\b",
    ),
    "python": _compile(
        r"\bpython\b", r"\bpip\b", r"\bpypi\b", r"\bdjango\b", r"\bflask\b", r"\bpandas\b",
        r"\bnumpy\b", r"\bpytest\b", r"\bvenv\b", r"\bconda\b",
    ),
    "oracle": _compile(
        r"\boracle\b", r"\bsqlplus\b", r"\bplsql\b", r"\btnsnames\b", r"\bpdb\b", r"\bcdb\b",
        r"\btablespace\b", r"\brman\b", r"\bdataguard\b", r"\basm\b", r"\brac\b", r"\bora-\d+",
    ),
    "network": _compile(
        r"\bnetwork\b", r"\bfirewall\b", r"\bdns\b", r"\bdhcp\b", r"\btcp\b", r"\budp\b",
        r"\bip\s*address\b", r"\bsubnet\b", r"\bvlan\b", r"\brouting\b", r"\bswitch\b",
        r"\bload\s*balanc", r"\bproxy\b", r"\bssl\b", r"\btls\b", r"\bcertificate\b",
    ),
    "security": _compile(
        r"\bstig\b", r"\bdisa\b", r"\bcve\b", r"\bvulnerabil", r"\bharden\b", r"\baudit\b",
        r"\bcompliance\b", r"\bscap\b", r"\bfips\b", r"\bcac\b", r"\bpki\b", r"\bencrypt",
    ),
    "linux": _compile(
        r"\blinux\b", r"\bubuntu\b", r"\brhel\b", r"\bcentos\b", r"\bbash\b", r"\bsystemd\b",
        r"\bsystemctl\b", r"\byum\b", r"\bapt\b", r"\bcron\b", r"\bchmod\b", r"\bchown\b",
    ),
    "vmware": _compile(
        r"\bvmware\b", r"\bvsphere\b", r"\besxi\b", r"\bvcenter\b", r"\bvsan\b", r"\bnsx\b",
        r"\bvmotion\b", r"\bdatastore\b", r"\bpowercli\b", r"\bova\b", r"\bovf\b",
    ),
    "azure": _compile(
        r"\bazure\b", r"\baz\s+\w+", r"\bentra\b", r"\baad\b", r"\bazure\s*ad\b",
        r"\barm\s*template\b", r"\bbicep\b", r"\bazure\s*devops\b", r"\bblob\b", r"\bkeyvault\b",
    ),
    "active_directory": _compile(
        r"\bactive\s*directory\b", r"\bad\s+\w+", r"\bldap\b", r"\bdomain\s*controller\b",
        r"\bgpupdate\b", r"\bdsquery\b", r"\bdsmod\b", r"\baduc\b", r"\bkerberos\b", r"\bspn\b",
    ),
    "ui_ux": _compile(
        r"\bui\b", r"\bux\b", r"\buser\s+experience\b", r"\buser\s+interface\b",
        r"\bvisual\s+design\b", r"\binteraction\s+design\b", r"\bdesign\s+system\b",
        r"\bwireframe\b", r"\bprototype\b", r"\baccessibility\b", r"\btypography\b",
        r"\blayout\b", r"\bresponsive\b",
    ),
    "web": _compile(
        r"\bhtml\b", r"\bcss\b", r"\bjavascript\b", r"\btypescript\b", r"\breact\b", r"\bvue\b",
        r"\bangular\b", r"\bsvelte\b", r"\bnext\.?js\b", r"\bwebpack\b", r"\bvite\b",
        r"\bfrontend\b", r"\bbrowser\b",
    ),
    "database": _compile(
        r"\bdatabase\b", r"\bsql\b", r"\bpostgres(?:ql)?\b", r"\bmysql\b", r"\bsqlite\b",
        r"\bmongo(?:db)?\b", r"\bredis\b", r"\bschema\b", r"\bmigration\b", r"\bindex(?:es)?\b",
        r"\bquery\b", r"\borm\b",
    ),
    "devops": _compile(
        r"\bdevops\b", r"\bdocker\b", r"\bkubernetes\b", r"\bk8s\b", r"\bhelm\b",
        r"\bterraform\b", r"\bansible\b", r"\bci/?cd\b", r"\bpipeline\b", r"\bjenkins\b",
        r"\bgithub\s+actions\b", r"\bdeploy", r"\bcontainer\b",
    ),
    "api": _compile(
        r"\bapi\b", r"\brest(?:ful)?\b", r"\bgraphql\b", r"\bgrpc\b", r"\bopenapi\b",
        r"\bswagger\b", r"\bendpoint\b", r"\bwebhook\b", r"\boauth\b", r"\bjwt\b",
        r"\brate\s*limit",
    ),
    "ai": _compile(
        r"\bai\b", r"\bllm\b", r"\bprompt\b", r"\bembedding", r"\brag\b", r"\bfine.?tun",
        r"\bagent\b", r"\bopenai\b", r"\banthropic\b", r"\bclaude\b", r"\btoken\s*limit",
        r"\bcontext\s*window\b", r"\bfunction\s+calling\b",
    ),
    "mobile": _compile(
        r"\bmobile\b", r"\breact.native\b", r"\breact\s*native\b", r"\bexpo\b", r"\bmmkv\b",
        r"\bcocoapods\b", r"\bmodule\s*federation\b", r"\bmetro\b", r"\bflatlist\b",
        r"\bapp\s*store\b", r"\bplay\s*store\b", r"\beas\s*build\b", r"\bdeep\s*link",
    ),
    "swift": _compile(
        r"\bswift\b", r"\bswiftui\b", r"\buikit\b", r"\bxcode\b", r"\bspm\b",
        r"\bswift\s*package\b", r"\bcombine\b", r"\bcore\s*data\b", r"\bcloudkit\b",
        r"\bkeychain\b", r"\bauto\s*layout\b", r"\bstoryboard\b", r"\bwkwebview\b", r"\b\.swift\b",
    ),
})


def list_domains() -> list[str]:
    return list(DOMAIN_PATTERNS)


def domain_to_agent_name(domain: str) -> str:
    """Map a domain name to its specialist agent name."""
    return SPECIALIST_PREFIX + re.sub(r"\s+", "_", domain.strip().lower())


def match_domains(text: str) -> list[str]:
    """Return the domains with at least one pattern found in *text*.

    Results follow the table's declaration order. Matching is advisory
    only; it never enables or disables an agent.
    """
    if not text:
        return []
    return [
        domain
        for domain, patterns in DOMAIN_PATTERNS.items()
        if any(p.search(text) for p in patterns)
    ]


def recommend_specialists(text: str) -> list[str]:
    """Return the specialist base names relevant to *text*."""
    return [domain_to_agent_name(d) for d in match_domains(text)]
