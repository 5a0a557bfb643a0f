"""Process-wide, read-only blueprint catalog.

Maps every ``TemplateType`` to its ``TemplateCatalog``.  The mapping is
built once at import time and exposed through ``MappingProxyType``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from stackgen.models import TemplateType
from stackgen.scaffolder.blueprints import TemplateCatalog

from . import cli_tool, go_clean_arch, typescript_express

CATALOG: Mapping[TemplateType, TemplateCatalog] = MappingProxyType({
    TemplateType.TYPESCRIPT_EXPRESS: typescript_express.CATALOG,
    TemplateType.GO_CLEAN_ARCH: go_clean_arch.CATALOG,
    TemplateType.CLI_TOOL: cli_tool.CATALOG,
})

__all__ = ["CATALOG"]
