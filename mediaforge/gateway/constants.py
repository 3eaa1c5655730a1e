"""Fixed provider policies for the gateway."""

# Google TTS voice selection and output format
TTS_SSML_GENDER = "NEUTRAL"
TTS_AUDIO_ENCODING = "MP3"
TTS_MEDIA_TYPE = "audio/mpeg"

DOCUMENTATION_PROMPT = "Generate a technical summary for the following project:\n{description}"

# Fixed checkpoints reported while a video job runs; the provider reports no intermediate progress
PROGRESS_STARTED = 0
PROGRESS_PROCESSING = 50
PROGRESS_COMPLETED = 100
