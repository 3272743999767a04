ERRORS = {
  "E_OPEN": "Failed to open file",
  "E_SHORT_READ": "Incomplete read",
  "E_SHORT_WRITE": "Incomplete write of BIN block",
  "E_NOT_SMD": "SMD marker 0xAA 0xBB missing at offset 8",
  "E_NOT_BIN": "SEGA marker missing at offset 0x100",
  "E_LOOKS_BIN": "Appears to be BIN format",
  "E_UNKNOWN_FORMAT": "Unrecognized file format",
  "E_TOO_SMALL": "Input file is too small",
  "E_BLOCK_BOUNDARY": "Input file does not end on 16KB block boundary (possible data corruption)",
  "E_OUTPUT_EXISTS": "Output file already exists",
}


class RomReadError(ValueError):
    """A per-file failure tagged with one of the ERRORS codes."""

    def __init__(self, code: str, detail: str | None = None, path: str | None = None):
        self.code = code
        self.detail = detail
        self.path = path
        text = ERRORS[code]
        if detail:
            text = f"{text}... {detail}"
        super().__init__(text)

    def as_entry(self) -> dict:
        entry = {"code": self.code, "message": ERRORS[self.code]}
        if self.path is not None:
            entry["path"] = self.path
        if self.detail:
            entry["detail"] = self.detail
        return entry
