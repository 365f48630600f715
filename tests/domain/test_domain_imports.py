from __future__ import annotations

import os
import subprocess
import sys

from regid.config import RegistrationConfig as ConfigRegistrationConfig
from regid.domain.model import RegistrationConfig


def test_registration_config_is_a_domain_type() -> None:
    assert ConfigRegistrationConfig is RegistrationConfig
    assert RegistrationConfig.__module__ == "regid.domain.model.registration"


def test_domain_does_not_import_config_or_adapters() -> None:
    script = (
        "import sys\n"
        "import regid.domain.synchronization\n"
        "prefixes = ('regid.config', 'regid.adapters')\n"
        "loaded = sorted(m for m in sys.modules if m.startswith(prefixes))\n"
        "print(','.join(loaded + [m for m in ('pydantic', 'dotenv') if m in sys.modules]))\n"
    )

    result = subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        check=True,
        env={**os.environ, "PYTHONPATH": os.pathsep.join(sys.path)},
    )

    assert result.stdout.strip() == ""
