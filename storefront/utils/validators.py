import re
from datetime import datetime, timezone

from .errors import ValidationError

YOUTUBE_URL_PATTERN = re.compile(r'^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*')
YOUTUBE_THUMBNAIL_TEMPLATE = 'https://img.youtube.com/vi/{video_id}/maxresdefault.jpg'

def validate_mobile_number(mobile):
    """Validate 10-digit mobile number"""
    if not mobile:
        return False
    return re.match(r'^[0-9]{10}$', str(mobile)) is not None

def extract_youtube_id(url):
    """Return the 11-character YouTube video id from a URL, or None"""
    if not url or not isinstance(url, str):
        return None
    match = YOUTUBE_URL_PATTERN.match(url)
    if match and len(match.group(2)) == 11:
        return match.group(2)
    return None

def youtube_thumbnail_url(video_id):
    return YOUTUBE_THUMBNAIL_TEMPLATE.format(video_id=video_id)

def parse_bool(value, field):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    raise ValidationError(f'{field} must be a boolean')

def parse_non_negative_int(value, field):
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a non-negative integer')
    try:
        number = int(value)
    except (ValueError, TypeError):
        raise ValidationError(f'{field} must be a non-negative integer')
    if number < 0 or (isinstance(value, float) and not value.is_integer()):
        raise ValidationError(f'{field} must be a non-negative integer')
    return number

def parse_datetime(value, field):
    """
    Parse an ISO-8601 string into a naive UTC datetime.

    Empty values clear the field. Aware datetimes are converted to UTC so
    they compare correctly with the stored naive UTC timestamps.
    """
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            raise ValidationError(f'{field} must be an ISO-8601 date')
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed

def parse_trimmed_string(value, field, max_length=None, required=False):
    if value is None:
        if required:
            raise ValidationError(f'{field} is required')
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{field} must be a string')
    value = value.strip()
    if required and not value:
        raise ValidationError(f'{field} is required')
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f'{field} cannot exceed {max_length} characters')
    return value

def parse_choice(value, field, choices):
    if value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)}")
    return value
