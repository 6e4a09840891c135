from pathlib import Path


class ReleaseScriptError(Exception):
    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class MissingArgument(ReleaseScriptError):
    def __init__(self):
        super().__init__("Missing next release version argument.")


class PatternNotFound(ReleaseScriptError):
    def __init__(self, path: Path):
        super().__init__(f"Could not find $VERSION assignment in {path}.")
        self.path = path
