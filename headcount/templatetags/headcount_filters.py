from django import template

from ..constants import INFIRMARY

register = template.Library()

EMPTY_CELL = '-'


@register.filter(name='present_cell')
def present_cell(report):
    """Present count for a dormitory row; a dash for the infirmary."""
    if report.dormitory == INFIRMARY:
        return EMPTY_CELL
    return report.present_count


@register.filter(name='infirmary_cell')
def infirmary_cell(report):
    """Sick count in the infirmary column, only for infirmary reports."""
    if report.dormitory == INFIRMARY:
        return report.sick_count
    return EMPTY_CELL
