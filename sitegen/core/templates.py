"""Jinja templates for the generated documents.

Autoescaping is on for every template; values that are already markup
(navigation, page content, the analytics snippet) arrive as
``markupsafe.Markup`` and pass through unchanged.
"""

from __future__ import annotations

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ lang }}"{% if html_classes %} class="{{ html_classes }}"{% endif %}>
<head>
<title>{{ title }}</title>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
{% if meta_description is not none %}
<meta name="description" content="{{ meta_description }}">
{% endif %}
{% if canonical_url is not none %}
<link rel="canonical" href="{{ canonical_url }}">
<meta property="og:type" content="website">
<meta property="og:site_name" content="{{ og_site_name }}">
<meta property="og:title" content="{{ title }}">
{% if meta_description is not none %}
<meta property="og:description" content="{{ meta_description }}">
{% endif %}
<meta property="og:url" content="{{ canonical_url }}">
{% if og_image is not none %}
<meta property="og:image" content="{{ og_image }}">
{% endif %}
<meta name="twitter:card" content="summary_large_image">
{% endif %}
{% if structured_data is not none %}
<script type="application/ld+json">{{ structured_data | safe }}</script>
{% endif %}
{% for href in local_stylesheets %}
<link href="{{ href }}" rel="stylesheet">
{% endfor %}
{% for sheet in external_stylesheets %}
<link rel="stylesheet" href="{{ sheet.href }}"
{%- if sheet.integrity is not none %} integrity="{{ sheet.integrity }}"{% endif %}
{%- if sheet.crossorigin is not none %} crossorigin="{{ sheet.crossorigin }}"{% endif %}
{%- if sheet.referrerpolicy is not none %} referrerpolicy="{{ sheet.referrerpolicy }}"{% endif %}>
{% endfor %}
{% if analytics %}
{{ analytics }}
{% endif %}
</head>
<body{% if body_classes %} class="{{ body_classes }}"{% endif %}>
{% if nav is not none %}
{{ nav }}
{% endif %}
<div{% if content_classes %} class="{{ content_classes }}"{% endif %}>{{ content }}</div>
{% if footer is not none %}
<div>{{ footer }}</div>
{% endif %}
</body>
</html>
"""

GTAG_TEMPLATE = """<script async src="https://www.googletagmanager.com/gtag/js?id={{ tag }}"></script>
<script>
window.dataLayer = window.dataLayer || [];
function gtag(){dataLayer.push(arguments);}
gtag('js', new Date());
gtag('config', '{{ tag }}');
</script>"""

SITEMAP_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{% for loc in locations %}
  <url>
    <loc>{{ loc }}</loc>
    <lastmod>{{ lastmod }}</lastmod>
  </url>
{% endfor %}
</urlset>
"""


def build_environment() -> Environment:
    return Environment(
        loader=DictLoader({
            "document.html": DOCUMENT_TEMPLATE,
            "gtag.html": GTAG_TEMPLATE,
            "sitemap.xml": SITEMAP_TEMPLATE,
        }),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


ENV = build_environment()


__all__ = ["ENV", "build_environment"]
