from django import template

from ..utils import format_currency, format_date

register = template.Library()


@register.filter
def currency(cents):
    return format_currency(cents)


@register.filter
def local_date(value):
    if not value:
        return ""
    return format_date(value)


@register.filter
def field_errors(state, field_name):
    if not state:
        return []
    return state.errors.get(field_name, [])
