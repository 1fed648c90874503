"""Command group: validate a single value from the command line."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import click

from argval.commands._base import ArgvalGroup

if TYPE_CHECKING:
    from argval.commands._context import AppContext


class NumberParamType(click.ParamType):
    """Parse ints as ints and everything else as floats."""

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float | Decimal:
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


NUMBER = NumberParamType()

_CHECK_EXAMPLES = """\
  argval check string jan@example.com --email
  argval check string "My Title" --title
  argval check number 42 --gte 1 --lt 100
  argval check list admin editor --each-one-of admin --each-one-of editor"""


@click.group(cls=ArgvalGroup, examples=_CHECK_EXAMPLES)
@click.pass_obj
def check(app: AppContext) -> None:
    """Validate a value; exits 1 and lists the errors when invalid."""


@check.command(
    "string",
    examples="""\
  argval check string jan@example.com --email
  argval check string jan@example.com --email-mx
  argval check string https://example.com --url --starts-with https://
  argval check string abc --length 2 4
  argval check string "" --default guest --one-of guest --one-of admin""",
)
@click.argument("value")
@click.option("--default", default=None, help="Replacement used when VALUE is empty.")
@click.option("--populated", is_flag=True, help="Reject an empty value.")
@click.option("--one-of", multiple=True, help="Allowed value (repeatable).")
@click.option("--not-one-of", multiple=True, help="Forbidden value (repeatable).")
@click.option("--starts-with", multiple=True, help="Allowed prefix (repeatable).")
@click.option("--ends-with", multiple=True, help="Allowed suffix (repeatable).")
@click.option("--contains", default=None, help="Required substring.")
@click.option("--matches", default=None, help="Regular expression the value must match.")
@click.option("--email", is_flag=True, help="Require an email address.")
@click.option("--email-mx", is_flag=True, help="Require an email address whose domain has MX.")
@click.option("--domain", is_flag=True, help="Require a domain name.")
@click.option("--url", is_flag=True, help="Require an http(s):// or www. URL.")
@click.option("--title", is_flag=True, help="Populated, at most 60 characters.")
@click.option("--subtitle", is_flag=True, help="At most 120 characters.")
@click.option("--description", is_flag=True, help="At most 1000 characters.")
@click.option(
    "--length",
    type=(int, int),
    default=None,
    metavar="MIN MAX",
    help="Inclusive length range.",
)
@click.pass_obj
def string_cmd(
    app: AppContext,
    value: str,
    default: str | None,
    populated: bool,
    one_of: tuple[str, ...],
    not_one_of: tuple[str, ...],
    starts_with: tuple[str, ...],
    ends_with: tuple[str, ...],
    contains: str | None,
    matches: str | None,
    email: bool,
    email_mx: bool,
    domain: bool,
    url: bool,
    title: bool,
    subtitle: bool,
    description: bool,
    length: tuple[int, int] | None,
) -> None:
    """Validate a string."""
    try:
        result = app.service.check_string(
            value,
            default=default,
            populated=populated,
            one_of=one_of,
            not_one_of=not_one_of,
            starts_with=starts_with,
            ends_with=ends_with,
            contains=contains,
            matches=matches,
            email=email,
            email_mx=email_mx,
            domain=domain,
            url=url,
            title=title,
            subtitle=subtitle,
            description=description,
            length=length,
        )
    except re.error as exc:
        msg = f"invalid regular expression: {exc}"
        raise click.BadParameter(msg, param_hint="--matches") from exc
    app.emit(result)


@check.command(
    "number",
    context_settings={"ignore_unknown_options": True},
    examples="""\
  argval check number 42 --gte 1 --lt 100
  argval check number 0 --default 10 --gt 5
  argval check number 3 --one-of 1 --one-of 2 --one-of 3
  argval check number -5 --gte -10""",
)
@click.argument("value", type=NUMBER)
@click.option("--default", type=NUMBER, default=None, help="Replacement used when VALUE is 0.")
@click.option("--populated", is_flag=True, help="Reject zero.")
@click.option("--one-of", type=NUMBER, multiple=True, help="Allowed value (repeatable).")
@click.option("--not-one-of", type=NUMBER, multiple=True, help="Forbidden value (repeatable).")
@click.option("--lt", type=NUMBER, default=None, help="Exclusive upper bound.")
@click.option("--lte", type=NUMBER, default=None, help="Inclusive upper bound.")
@click.option("--gt", type=NUMBER, default=None, help="Exclusive lower bound.")
@click.option("--gte", type=NUMBER, default=None, help="Inclusive lower bound.")
@click.pass_obj
def number_cmd(
    app: AppContext,
    value: int | float,
    default: int | float | None,
    populated: bool,
    one_of: tuple[int | float, ...],
    not_one_of: tuple[int | float, ...],
    lt: int | float | None,
    lte: int | float | None,
    gt: int | float | None,
    gte: int | float | None,
) -> None:
    """Validate a number. VALUE may be negative (`argval check number -5`)."""
    result = app.service.check_number(
        value,
        default=default,
        populated=populated,
        one_of=one_of,
        not_one_of=not_one_of,
        lt=lt,
        lte=lte,
        gt=gt,
        gte=gte,
    )
    app.emit(result)


@check.command(
    "list",
    examples="""\
  argval check list a b c --len-gte 3
  argval check list admin editor --each-one-of admin --each-one-of editor
  argval check list a "" --each-populated
  argval check list --populated
  argval check list --len-gte 2 -- -a b""",
)
@click.argument("values", nargs=-1)
@click.option("--populated", is_flag=True, help="Reject an empty list.")
@click.option("--len-eqs", type=int, default=None, help="Exact number of values.")
@click.option("--len-gt", type=int, default=None, help="More than N values.")
@click.option("--len-gte", type=int, default=None, help="At least N values.")
@click.option("--len-lt", type=int, default=None, help="Less than N values.")
@click.option("--len-lte", type=int, default=None, help="At most N values.")
@click.option("--includes", multiple=True, help="Required value (repeatable).")
@click.option("--each-default", default=None, help="Replacement for empty values.")
@click.option("--each-populated", is_flag=True, help="Reject empty values.")
@click.option("--each-one-of", multiple=True, help="Allowed value (repeatable).")
@click.option("--each-not-one-of", multiple=True, help="Forbidden value (repeatable).")
@click.pass_obj
def list_cmd(
    app: AppContext,
    values: tuple[str, ...],
    populated: bool,
    len_eqs: int | None,
    len_gt: int | None,
    len_gte: int | None,
    len_lt: int | None,
    len_lte: int | None,
    includes: tuple[str, ...],
    each_default: str | None,
    each_populated: bool,
    each_one_of: tuple[str, ...],
    each_not_one_of: tuple[str, ...],
) -> None:
    """Validate a list of values.

    Put `--` before values that start with a dash: `argval check list -- -a b`.
    """
    result = app.service.check_list(
        values,
        populated=populated,
        len_eqs=len_eqs,
        len_gt=len_gt,
        len_gte=len_gte,
        len_lt=len_lt,
        len_lte=len_lte,
        includes=includes,
        each_default=each_default,
        each_populated=each_populated,
        each_one_of=each_one_of,
        each_not_one_of=each_not_one_of,
    )
    app.emit(result)
