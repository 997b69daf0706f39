from django import template
register = template.Library()


@register.filter
def get_item(dictionary, key):
    if dictionary:
        # Obsługa kluczy string/int
        val = dictionary.get(key)
        if val is None:
            val = dictionary.get(int(key) if str(key).isdigit() else str(key))
        return val
    return None


@register.filter
def grid_template(layout):
    """CSS grid-template-columns dla układu siatki."""
    if layout is None or layout.columns is None:
        return "repeat(auto-fit, minmax(280px, 1fr))"
    return f"repeat({max(1, layout.columns)}, minmax(0, 1fr))"
