"""
namegen logging module.

This file contains all available filters for customizing namegen's log output.
The `naming_stage` log field is designed in a hierarchical way, to allow quick
filtering of records. Each segment consists of sub-segments which build a path
to a log record.

```
──> root
    ├──> generator
    ├──> registry
    ├──> kernel
         ├──> guard
         └──> checker
    └──> cache
```

For example `root.kernel` will print both guard rejections and checker
traces. `root.generator` will provide only fresh-name allocations, which is
very chatty at DEBUG level.

Fiters can be combined with `,` when passing to `get_logger_handler`.

Instead of full names, you can use abbrevations, listed in `_abbr_mapping`
dictionary.

Here's an example of logger setup:

```py
import logging
from namegen.util.logging import get_logger_handler, FORMAT

handler = get_logger_handler(filter_pattern="r.reg,r.k.kg")
logging.basicConfig(level=logging.DEBUG, handlers=[handler], format=FORMAT)
```

"""

from logging import Filter, StreamHandler


def _make_dict(val: str):
    return {"naming_stage": val}


LOG_GENERATOR = _make_dict("root.generator")
LOG_REGISTRY = _make_dict("root.registry")
LOG_KERNEL_GUARD = _make_dict("root.kernel.guard")
LOG_KERNEL_CHECKER = _make_dict("root.kernel.checker")
LOG_CACHE = _make_dict("root.cache")

FORMAT = "%(asctime)s [%(naming_stage)s] %(levelname)s: %(message)s"

_abbr_mapping = {
    "r": "root",
    "g": "generator",
    "reg": "registry",
    "k": "kernel",
    "kg": "guard",
    "kc": "checker",
    "c": "cache",
}


def _expand(pattern: str) -> str:
    return ".".join(_abbr_mapping.get(s, s) for s in pattern.split("."))


def get_logger_handler(filter_pattern: str = "root") -> StreamHandler:
    handler = StreamHandler()
    patterns = [_expand(p.strip()) for p in filter_pattern.split(",")]

    class _NamegenFilter(Filter):
        def filter(self, record):
            if record.name.startswith("namegen"):
                stage = getattr(record, "naming_stage", "root")
                return any(stage.startswith(p) for p in patterns)
            return False

    handler.addFilter(_NamegenFilter())
    return handler
