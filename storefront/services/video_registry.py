import logging

from storefront.models import db
from storefront.models.yt_video import YTVideo
from storefront.utils.errors import ValidationError, NotFoundError
from storefront.utils.validators import (
    extract_youtube_id, youtube_thumbnail_url,
    parse_bool, parse_non_negative_int, parse_trimmed_string
)


class VideoRegistry:
    """Embedded YouTube videos shown on the storefront"""

    @staticmethod
    def _derive(video_url):
        if not video_url:
            raise ValidationError('Video URL is required')
        if not isinstance(video_url, str):
            raise ValidationError('Invalid YouTube URL')
        video_id = extract_youtube_id(video_url)
        if not video_id:
            raise ValidationError('Invalid YouTube URL')
        return video_id, youtube_thumbnail_url(video_id)

    @staticmethod
    def _ordered(query):
        return query.order_by(YTVideo.order.asc(), YTVideo.created_at.desc())

    @staticmethod
    def list_public():
        return VideoRegistry._ordered(YTVideo.query.filter(YTVideo.is_active.is_(True))).all()

    @staticmethod
    def list_admin():
        return VideoRegistry._ordered(YTVideo.query).all()

    @staticmethod
    def get_or_404(video_pk):
        video = db.session.get(YTVideo, video_pk)
        if not video:
            raise NotFoundError('Video not found')
        return video

    @staticmethod
    def create(data):
        video_url = data.get('videoUrl')
        video_id, thumbnail_url = VideoRegistry._derive(video_url)

        video = YTVideo(
            title=parse_trimmed_string(data.get('title'), 'title', max_length=255),
            video_url=video_url,
            video_id=video_id,
            thumbnail_url=thumbnail_url,
            order=parse_non_negative_int(data['order'], 'order') if data.get('order') is not None else 0,
            is_active=parse_bool(data['isActive'], 'isActive') if data.get('isActive') is not None else True,
        )
        db.session.add(video)
        db.session.commit()

        logging.info(f"YouTube video {video.video_id} added")
        return video

    @staticmethod
    def update(video_pk, data):
        video = VideoRegistry.get_or_404(video_pk)

        video_url = data.get('videoUrl')
        # Derived fields only move when the URL actually changes
        if video_url and video_url != video.video_url:
            video.video_id, video.thumbnail_url = VideoRegistry._derive(video_url)
            video.video_url = video_url

        if 'title' in data:
            video.title = parse_trimmed_string(data['title'], 'title', max_length=255)
        if data.get('order') is not None:
            video.order = parse_non_negative_int(data['order'], 'order')
        if data.get('isActive') is not None:
            video.is_active = parse_bool(data['isActive'], 'isActive')

        db.session.commit()
        return video

    @staticmethod
    def delete(video_pk):
        video = VideoRegistry.get_or_404(video_pk)
        db.session.delete(video)
        db.session.commit()
        logging.info(f"YouTube video {video_pk} deleted")
