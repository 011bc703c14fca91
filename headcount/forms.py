from django import forms

from .constants import INFIRMARY, MAX_IMAGES
from .models import Report
from .thaidate import current_academic_year


def _apply_bootstrap_controls(form):
    """Add Bootstrap classes to widgets for better mobile usability."""
    for name, field in form.fields.items():
        widget = field.widget
        if isinstance(widget, forms.HiddenInput):
            continue
        if isinstance(widget, (forms.Select, forms.SelectMultiple)):
            widget.attrs["class"] = (widget.attrs.get("class", "") + " form-select").strip()
        elif isinstance(widget, (forms.CheckboxInput, forms.CheckboxSelectMultiple)):
            widget.attrs["class"] = (widget.attrs.get("class", "") + " form-check-input").strip()
        else:
            widget.attrs["class"] = (widget.attrs.get("class", "") + " form-control").strip()


class MultipleImageInput(forms.ClearableFileInput):
    allow_multiple_selected = True


class MultipleImageField(forms.ImageField):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", MultipleImageInput(attrs={'accept': 'image/*'}))
        super().__init__(*args, **kwargs)

    def clean(self, data, initial=None):
        single_clean = super().clean
        if isinstance(data, (list, tuple)):
            return [single_clean(d, initial) for d in data]
        if not data:
            return []
        return [single_clean(data, initial)]


class ReportForm(forms.ModelForm):
    images = MultipleImageField(required=False, help_text=f'Up to {MAX_IMAGES} photos')
    remove_images = forms.ModelMultipleChoiceField(
        queryset=None, required=False, widget=forms.CheckboxSelectMultiple,
    )

    class Meta:
        model = Report
        fields = [
            'reporter_name', 'position', 'academic_year', 'dormitory',
            'present_count', 'sick_count', 'log',
        ]
        widgets = {
            'log': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.instance.pk:
            self.fields['academic_year'].initial = current_academic_year()
            del self.fields['remove_images']
        else:
            self.fields['remove_images'].queryset = self.instance.images.all()
        for name in ('present_count', 'sick_count'):
            self.fields[name].widget.attrs.update({'inputmode': 'numeric', 'min': 0})
        # The infirmary has no present count; the field is optional there
        self.fields['present_count'].required = False
        _apply_bootstrap_controls(self)

    def clean(self):
        cleaned = super().clean()
        if cleaned.get('dormitory') == INFIRMARY:
            cleaned['present_count'] = 0
        elif cleaned.get('present_count') is None and 'present_count' not in self.errors:
            self.add_error('present_count', 'This field is required.')

        kept = 0
        if self.instance.pk:
            removing = cleaned.get('remove_images') or []
            kept = self.instance.images.count() - len(removing)
        if kept + len(cleaned.get('images') or []) > MAX_IMAGES:
            self.add_error('images', f'You can attach at most {MAX_IMAGES} photos.')
        return cleaned
