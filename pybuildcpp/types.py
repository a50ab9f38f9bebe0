from typing import Literal

Profile = Literal["debug", "release"]
Artifact = Literal["executable", "static", "dynamic"]


Args = tuple[str, ...]
Cmd = tuple[str, ...]
