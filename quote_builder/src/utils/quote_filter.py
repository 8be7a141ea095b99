from typing import Iterable, List

from ..models.quote import Quote

def filter_quotes(
    quotes: Iterable[Quote],
    project_name: str = "",
    project_number: str = ""
) -> List[Quote]:
    """
    Find quotes whose project name and number contain the given text.

    Matching is case-insensitive substring containment of the text as
    given, whitespace included. Empty filters are ignored, so with no
    filters every quote is returned. The input is never modified; a new
    list is returned.

    Args:
        quotes: Quotes to search
        project_name: Text to look for in the project name
        project_number: Text to look for in the project number

    Returns:
        List of matching quotes in their original order
    """
    name_query = (project_name or "").lower()
    number_query = (project_number or "").lower()

    results = []
    for quote in quotes:
        if name_query and name_query not in (quote.project_name or "").lower():
            continue
        if number_query and number_query not in (quote.project_number or "").lower():
            continue
        results.append(quote)

    return results
