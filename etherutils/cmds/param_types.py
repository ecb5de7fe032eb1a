from __future__ import annotations

from typing import Any, Optional

import click

from etherutils.types.wei import Wei
from etherutils.util.conversion import string_to_wei
from etherutils.util.errors import ParseError


class WeiParamType(click.ParamType):
    """
    A Click parameter type for amounts given either as a plain number of Wei or as a
    number followed by a unit, e.g. "20 GWei" or "1.5 ether".
    """

    name: str = "AMOUNT"  # type name for cli

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> Wei:
        # int defaults are already a number of Wei
        if isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                self.fail("Amount can not be negative", param, ctx)
            return Wei(value)
        if not isinstance(value, str):
            self.fail("Invalid Type, amount must be string.", param, ctx)
        try:
            return string_to_wei(value)
        except ParseError as e:
            self.fail(str(e), param, ctx)
