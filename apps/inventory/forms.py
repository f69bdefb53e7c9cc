"""
Forms for the admin screen.
"""
from django import forms
from .models import Item


class ItemForm(forms.ModelForm):
    """Add/edit form for an inventory item."""

    class Meta:
        model = Item
        fields = ['name', 'category', 'quantity', 'threshold', 'description', 'source_url']
        widgets = {
            'name': forms.TextInput(attrs={'placeholder': 'Enter item name'}),
            'quantity': forms.NumberInput(attrs={'min': 0}),
            'threshold': forms.NumberInput(attrs={'min': 0}),
            'description': forms.Textarea(attrs={'rows': 3, 'placeholder': 'Enter item description'}),
            'source_url': forms.URLInput(attrs={'placeholder': 'https://example.com/product'}),
        }

    @classmethod
    def for_item(cls, item, data=None):
        """Form pre-filled from an existing item, optional fields as empty strings."""
        initial = {
            'name': item.name,
            'description': item.description or '',
            'category': item.category,
            'quantity': item.quantity,
            'threshold': item.threshold,
            'source_url': item.source_url or '',
        }
        return cls(data=data, initial=initial)
