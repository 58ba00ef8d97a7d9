"""Utilities for generating Markdown block constructs."""


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced Markdown code block."""
    return f"```{lang}\n{code.rstrip()}\n```"


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a left-aligned Markdown table, or nothing when there are no rows."""
    if not rows:
        return ""
    out = [
        "|" + "|".join(headers) + "|",
        "|" + "|".join([":---"] * len(headers)) + "|",
    ]
    out.extend("|" + "|".join(r) + "|" for r in rows)
    return "\n".join(out)


def md_callout(style: str, body: str) -> str:
    """Wrap body in a styled hint block with the markers on their own lines."""
    return f'{{% hint style="{style}" %}}\n{body.strip()}\n{{% endhint %}}'


def front_matter(title: str, slug: str) -> str:
    """Generate the metadata header placed at the top of a page."""
    return f"---\ntitle: {title}\nslug: {slug}\n---"


def join_slug(prefix: str, name: str) -> str:
    """Join a slug prefix and a page name."""
    return f"{prefix}/{name}"
