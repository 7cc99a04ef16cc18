"""CSV download of articles for the admin surface."""

import csv

from django.http import StreamingHttpResponse

CSV_COLUMNS = ["id", "title", "created_at", "updated_at", "user_id", "confirmed", "deleted_at"]


class _Echo:
    """File-like object whose ``write`` hands the line back to the csv writer's caller."""

    def write(self, value):
        return value


def _format(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def iter_csv_lines(queryset):
    """Yield the header line, then one line per article."""
    writer = csv.writer(_Echo())
    yield writer.writerow(CSV_COLUMNS)
    for row in queryset.values_list(*CSV_COLUMNS).iterator():
        yield writer.writerow([_format(value) for value in row])


def csv_download(queryset, filename: str = "articles.csv") -> StreamingHttpResponse:
    response = StreamingHttpResponse(iter_csv_lines(queryset), content_type="text/csv")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


__all__ = ["CSV_COLUMNS", "csv_download", "iter_csv_lines"]
