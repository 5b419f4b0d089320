"""Document transformer: frontmatter then admonitions, no I/O"""

from doc2quarto.core.admonitions import rewrite_admonitions
from doc2quarto.core.frontmatter import rewrite_frontmatter
from doc2quarto.core.models import ConversionResult


def convert_content(
    content: str,
    protect_code_fences: bool = True,
    parser_config: str = "commonmark",
    ) -> ConversionResult:
    """Convert one Docusaurus document's text to Quarto."""
    text, fm_warnings = rewrite_frontmatter(content)
    text, adm_warnings = rewrite_admonitions(text, protect_code_fences, parser_config)
    return ConversionResult(content=text, warnings=fm_warnings + adm_warnings)
