from datetime import datetime
from . import db

class YTVideo(db.Model):
    __tablename__ = 'yt_videos'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=True)
    video_url = db.Column(db.Text, nullable=False)
    video_id = db.Column(db.String(11), nullable=False)
    thumbnail_url = db.Column(db.Text, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    order = db.Column(db.Integer, default=0, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<YTVideo {self.video_id}>'

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'videoUrl': self.video_url,
            'videoId': self.video_id,
            'thumbnailUrl': self.thumbnail_url,
            'isActive': self.is_active,
            'order': self.order,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'updatedAt': self.updated_at.isoformat() if self.updated_at else None,
        }
