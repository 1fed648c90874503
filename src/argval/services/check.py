"""CheckService: builds check chains from declarative options.

Each ``check_*`` method wraps the value in the matching facade, applies
the requested checks in a fixed order, and returns a
:class:`~argval.services.result.CheckResult`. Programming errors (an
invalid regex) propagate to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from argval.config.settings import ArgvalSettings
from argval.core.list import ListArg
from argval.core.number import NumberArg
from argval.core.string import MxResolver, StringArg
from argval.services.result import CheckResult

logger = logging.getLogger(__name__)

Number = int | float | Decimal


class CheckService:
    """Run string, number and list check chains.

    Args:
        settings: Source of the DNS configuration and error separator.
        mx_resolver: Overrides the dnspython-backed MX check.
    """

    def __init__(
        self,
        settings: ArgvalSettings | None = None,
        *,
        mx_resolver: MxResolver | None = None,
    ) -> None:
        self._settings = settings or ArgvalSettings()
        self._mx_resolver = mx_resolver

    @property
    def separator(self) -> str:
        return self._settings.messages.separator

    def _resolver(self) -> MxResolver:
        if self._mx_resolver is None:
            from argval.infrastructure.dns import DnsMxResolver

            self._mx_resolver = DnsMxResolver(self._settings.dns)
        return self._mx_resolver

    def _finish(self, op: str, arg: StringArg | NumberArg[Number] | ListArg[str]) -> CheckResult:
        result = CheckResult.from_arg(op, arg, value=arg.value, separator=self.separator)
        logger.debug("%s finished with %d error(s)", op, len(result.errors))
        return result

    def check_string(
        self,
        value: str,
        *,
        default: str | None = None,
        populated: bool = False,
        one_of: Sequence[str] = (),
        not_one_of: Sequence[str] = (),
        starts_with: Sequence[str] = (),
        ends_with: Sequence[str] = (),
        contains: str | None = None,
        matches: str | None = None,
        email: bool = False,
        email_mx: bool = False,
        domain: bool = False,
        url: bool = False,
        title: bool = False,
        subtitle: bool = False,
        description: bool = False,
        length: tuple[int, int] | None = None,
    ) -> CheckResult:
        """Check a string.

        Raises:
            re.error: If *matches* is not a valid regular expression.
        """
        arg = StringArg(value)
        if default is not None:
            arg.fallback_if_empty(default)
        if populated:
            arg.populated()
        arg.is_(*one_of).is_not(*not_one_of)
        if starts_with:
            arg.starts_with(*starts_with)
        if ends_with:
            arg.ends_with(*ends_with)
        if contains is not None:
            arg.contains(contains)
        if matches is not None:
            arg.matches(matches)
        if email_mx:
            arg.is_email_with_existing_mx(self._resolver())
        elif email:
            arg.is_email()
        if domain:
            arg.is_domain()
        if url:
            arg.is_url()
        if title:
            arg.is_title()
        if subtitle:
            arg.is_subtitle()
        if description:
            arg.is_description()
        if length is not None:
            arg.length_in_range(*length)
        return self._finish("check_string", arg)

    def check_number(
        self,
        value: Number,
        *,
        default: Number | None = None,
        populated: bool = False,
        one_of: Sequence[Number] = (),
        not_one_of: Sequence[Number] = (),
        lt: Number | None = None,
        lte: Number | None = None,
        gt: Number | None = None,
        gte: Number | None = None,
    ) -> CheckResult:
        """Check a number."""
        arg: NumberArg[Number] = NumberArg(value)
        if default is not None:
            arg.default(default)
        if populated:
            arg.populated()
        arg.is_(*one_of).is_not(*not_one_of)
        if lt is not None:
            arg.lt(lt)
        if lte is not None:
            arg.lte(lte)
        if gt is not None:
            arg.gt(gt)
        if gte is not None:
            arg.gte(gte)
        return self._finish("check_number", arg)

    def check_list(
        self,
        values: Sequence[str],
        *,
        populated: bool = False,
        len_eqs: int | None = None,
        len_gt: int | None = None,
        len_gte: int | None = None,
        len_lt: int | None = None,
        len_lte: int | None = None,
        includes: Sequence[str] = (),
        each_default: str | None = None,
        each_populated: bool = False,
        each_one_of: Sequence[str] = (),
        each_not_one_of: Sequence[str] = (),
    ) -> CheckResult:
        """Check a list of strings."""
        arg: ListArg[str] = ListArg(values)
        if each_default is not None:
            arg.each_default(each_default)
        if populated:
            arg.populated()
        if len_eqs is not None:
            arg.len_eqs(len_eqs)
        if len_gt is not None:
            arg.len_gt(len_gt)
        if len_gte is not None:
            arg.len_gte(len_gte)
        if len_lt is not None:
            arg.len_lt(len_lt)
        if len_lte is not None:
            arg.len_lte(len_lte)
        arg.includes(*includes)
        if each_populated:
            arg.each_populated()
        if each_one_of:
            arg.each_is(*each_one_of)
        arg.each_is_not(*each_not_one_of)
        return self._finish("check_list", arg)
