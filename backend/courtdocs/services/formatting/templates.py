from string import Template

# 1. Standalone HTML shell used for export/download
HTML_DOCUMENT_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>$title</title>
    <style>$styles</style>
</head>
<body>
$sections
</body>
</html>""")

# 2. Certificate of service prose, keyed by certificate format
DECLARATION_OPENING = Template("<p>I, $declarant, declare as follows:</p>")

DECLARATION_CLOSING = Template(
    "<p>I declare under penalty of perjury under the laws of the United States of America "
    "that the foregoing is true and correct.</p>\n"
    "<p>Executed on $date.</p>"
)

AFFIDAVIT_OPENING = Template(
    "<p>STATE OF ____________</p>\n"
    "<p>COUNTY OF ____________</p>\n"
    "<p>$declarant, being duly sworn, deposes and says:</p>"
)

AFFIDAVIT_CLOSING = Template(
    "<p>Subscribed and sworn to before me this ____ day of ____________, 20____.</p>\n"
    '<div class="notary-line">\n'
    '<div class="signature-placeholder">_______________________________</div>\n'
    '<div class="notary-title">Notary Public</div>\n'
    "</div>"
)

CERTIFICATE_OPENING = Template(
    "<p>I hereby certify that on $date, I served the foregoing document on the following parties:</p>"
)

# 3. Word count certification
WORD_COUNT_DECLARATION_TEMPLATE = Template("""<div class="word-count-declaration">
<p>This document complies with the word limit of $citation because, excluding the parts of the document exempted, this document contains $count words$limit.</p>
</div>""")

# 4. Stylesheets
DOCUMENT_STYLES_TEMPLATE = Template("""
@page {
    size: $page_size $orientation;
    margin: $margin_top $margin_right $margin_bottom $margin_left;
}

body {
    font-family: $font_family, serif;
    font-size: $font_size;
    line-height: $line_height;
    margin: 0;
    padding: 0;
}

.caption {
    margin-bottom: 2em;
}

.signature-block {
    margin-top: 3em;
    page-break-inside: avoid;
}

.signature-intro {
    margin-bottom: 3em;
}

.signature-line {
    margin-bottom: 1em;
}

.attorney-info {
    margin-top: 1em;
}

.certificate-of-service {
    page-break-before: always;
    margin-top: 2em;
}

.cert-title {
    font-weight: bold;
    text-align: center;
    margin-bottom: 1em;
    text-decoration: underline;
}

.service-item {
    margin: 1em 0 1em 2em;
}

.table-of-contents,
.table-of-authorities {
    page-break-after: always;
}

.toc-title,
.toa-title {
    font-weight: bold;
    text-align: center;
    margin-bottom: 1em;
}

.toc-entry,
.toa-entry {
    display: flex;
    justify-content: space-between;
    margin: 0.25em 0;
}

.toc-dots,
.toa-dots {
    flex: 1;
    border-bottom: 1px dotted black;
    margin: 0 0.5em 0.25em 0.5em;
}

.toc-rule {
    flex: 1;
    border-bottom: 1px solid black;
    margin: 0 0.5em 0.25em 0.5em;
}

.toa-category {
    margin-bottom: 1em;
}

.toa-category-title {
    font-weight: bold;
    font-style: italic;
    margin-bottom: 0.5em;
}

h1, h2, h3, h4 {
    page-break-after: avoid;
}

p {
    text-indent: 0.5in;
    margin: 0;
    margin-bottom: $paragraph_spacing;
}

.no-indent {
    text-indent: 0;
}

blockquote {
    margin: 1em 0.5in;
    font-size: $blockquote_size;
}

.footnote {
    font-size: $footnote_size;
}

@media print {
    .page-number {
        position: fixed;
        $page_number_position
    }
}
""")

CAPTION_STYLES = """
.caption-header {
    text-align: center;
    margin-bottom: 1.5em;
}

.court-name {
    font-weight: bold;
    font-size: 1.1em;
}

.caption-box {
    display: flex;
    border: 1px solid black;
    margin: 1em 0;
}

.caption-parties {
    flex: 1;
    padding: 1em;
    border-right: 1px solid black;
}

.caption-info {
    width: 40%;
    padding: 1em;
}

.party-name {
    margin: 0.25em 0;
}

.party-vs {
    text-align: center;
    margin: 0.5em 0;
    font-weight: bold;
}

.case-number {
    font-weight: bold;
}

.document-title {
    font-weight: bold;
    text-decoration: underline;
    text-align: center;
    margin-top: 1em;
}

.caption-separator {
    font-family: monospace;
    margin: 0.5em 0;
}

.vs-section {
    display: flex;
    justify-content: space-between;
    align-items: center;
    margin: 1em 0;
}

.california-superior .caption-table {
    width: 100%;
    border-collapse: collapse;
}

.california-superior .parties-cell,
.california-superior .info-cell {
    vertical-align: top;
    padding: 1em;
}

.texas .caption-table {
    border-collapse: collapse;
}

.texas .caption-table td {
    vertical-align: top;
    padding: 0.25em;
}

.texas .section-column {
    text-align: center;
    vertical-align: middle;
}

.centered {
    text-align: center;
}
"""
