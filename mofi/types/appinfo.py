from dataclasses import dataclass

# -------------------------
# Data model
# -------------------------

@dataclass(frozen=True)
class AppInfo:
    name: str
    path: str
