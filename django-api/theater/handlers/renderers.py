from rest_framework.renderers import BaseRenderer


class PlainTextRenderer(BaseRenderer):
    """Renders statement text as-is; selected with ``?format=txt``."""

    media_type = "text/plain"
    format = "txt"
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None) -> bytes:
        if isinstance(data, dict) and "code" in data:
            data = f"{data['code']}: {data.get('message', '')}\n"
        return str(data).encode(self.charset)
