from flask import Blueprint

from storefront.api.utils import success_response, handle_exception, get_json_body
from storefront.services.video_registry import VideoRegistry
from storefront.utils.permissions import admin_required

yt_videos_bp = Blueprint('yt_videos', __name__)

@yt_videos_bp.route('/yt-videos', methods=['GET'])
def list_videos():
    """Active videos for the storefront slider"""
    try:
        videos = VideoRegistry.list_public()
        return success_response(count=len(videos), data=[v.to_dict() for v in videos])
    except Exception as e:
        return handle_exception(e, "YT Video Listing")

@yt_videos_bp.route('/admin/yt-videos', methods=['GET'])
@admin_required
def list_admin_videos():
    try:
        videos = VideoRegistry.list_admin()
        return success_response(count=len(videos), data=[v.to_dict() for v in videos])
    except Exception as e:
        return handle_exception(e, "Admin YT Video Listing")

@yt_videos_bp.route('/admin/yt-videos', methods=['POST'])
@admin_required
def create_video():
    try:
        video = VideoRegistry.create(get_json_body())
        return success_response(
            message='YouTube video added successfully',
            status_code=201,
            data=video.to_dict()
        )
    except Exception as e:
        return handle_exception(e, "YT Video Create")

@yt_videos_bp.route('/admin/yt-videos/<int:video_pk>', methods=['PUT'])
@admin_required
def update_video(video_pk):
    try:
        video = VideoRegistry.update(video_pk, get_json_body())
        return success_response(message='YouTube video updated successfully', data=video.to_dict())
    except Exception as e:
        return handle_exception(e, "YT Video Update")

@yt_videos_bp.route('/admin/yt-videos/<int:video_pk>', methods=['DELETE'])
@admin_required
def delete_video(video_pk):
    try:
        VideoRegistry.delete(video_pk)
        return success_response(message='YouTube video deleted successfully')
    except Exception as e:
        return handle_exception(e, "YT Video Delete")
