"""Status trailers appended to parsed messages."""

from __future__ import annotations


def enhance(text: str, status: str | None, file_count: int) -> str:
    """Append the trailer for ``status``; unknown statuses leave ``text`` as is."""

    if status == "deployed":
        if file_count > 1:
            return (
                f"{text}\n\n🎉 **Multi-file application deployed successfully!**\n"
                f"Your {file_count}-file app is now live and ready to use."
            )
        return f"{text}\n\n🎉 **Application deployed successfully!**\nYour app is now live and ready to use."
    if status == "deploying":
        return f"{text}\n\n⏳ **Deployment in progress...**\nYour app will be ready shortly."
    if status == "failed":
        return f"{text}\n\n❌ **Deployment encountered issues**\nI'll help you fix this and redeploy."
    return text
