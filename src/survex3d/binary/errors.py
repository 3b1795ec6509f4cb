from __future__ import annotations


class SurvexError(ValueError):
    pass


class InvalidFormat(SurvexError):
    """Buffer is not a Survex 3D image (bad magic, version or header)."""


class UnexpectedEndOfInput(SurvexError):
    def __init__(self, offset: int, need: int, have: int):
        super().__init__(f"underrun: need {need} at {offset}, have {have}")
        self.offset = offset
        self.need = need
        self.have = have
