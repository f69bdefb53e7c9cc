"""
Forms for the request screen.
"""
from django import forms
from django.utils.translation import gettext_lazy as _
from apps.inventory.models import StockStatus
from apps.inventory.services.stock_service import StockService
from apps.requests.services.request_service import coerce_quantity

GROUP_LABELS = {
    StockStatus.OUT_OF_STOCK.value: '⛔ OUT OF STOCK - URGENT',
    StockStatus.LOW_STOCK.value: '⚠️ LOW STOCK',
    StockStatus.IN_STOCK.value: '✅ IN STOCK',
}


def item_choices(partition):
    """Grouped dropdown choices; empty groups are left out."""
    choices = [('', _('Choose an item...'))]
    for status, label in GROUP_LABELS.items():
        group = partition[status]
        if group:
            choices.append((label, [(str(item.id), StockService.option_label(item)) for item in group]))
    return choices


class RestockRequestForm(forms.Form):
    """Restock request form bound to the current item list."""

    item = forms.CharField(
        required=False,
        label=_('Select Item'),
        widget=forms.Select(),
    )
    quantity = forms.CharField(
        required=False,
        initial=1,
        label=_('Quantity Needed'),
        widget=forms.NumberInput(attrs={'min': 1}),
    )
    notes = forms.CharField(
        required=False,
        label=_('Additional Notes (Optional)'),
        widget=forms.Textarea(attrs={'rows': 4, 'placeholder': 'Add any additional information...'}),
    )

    def __init__(self, *args, partition=None, **kwargs):
        super().__init__(*args, **kwargs)
        if partition is not None:
            self.fields['item'].widget.choices = item_choices(partition)

    def clean_quantity(self):
        return coerce_quantity(self.cleaned_data.get('quantity'))
