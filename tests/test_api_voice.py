from fastapi import status


def test_health_and_config_are_public(client):
    health = client.get("/api/voice/health").json()["data"]
    assert health["services"]["whisper_stt"] is False
    assert health["languages"] == 12

    config = client.get("/api/voice/config").json()["data"]
    assert config["stt_models"] == ["browser-speech-api", "whisper-1"]
    assert config["max_file_size"] == "10MB"
    assert len(config["supported_languages"]) == 12


def test_browser_voices(client):
    body = client.get("/api/voice/browser-voices", params={"language": "id"}).json()
    assert body["data"] == ["Google Bahasa Indonesia", "Microsoft Andika Desktop"]
    assert body["meta"]["total_voices"] == 2

    body = client.get("/api/voice/browser-voices", params={"language": "xx"}).json()
    assert body["data"] == ["Default Voice"]


def test_voice_endpoints_require_auth(client):
    assert client.post("/api/voice/tts", json={"text": "Hello"}).status_code == status.HTTP_401_UNAUTHORIZED
    assert client.post("/api/voice/stt").status_code == status.HTTP_401_UNAUTHORIZED


def test_tts_uses_original_text_without_ai(client, user_headers):
    response = client.post(
        "/api/voice/tts",
        json={"text": "Tell me about yourself", "language": "en", "rate": 1.2},
        headers=user_headers,
    )
    data = response.json()["data"]
    assert data["text"] == "Tell me about yourself"
    assert data["voice"] == "Google US English"
    assert data["rate"] == 1.2


def test_stt_without_audio_returns_browser_config(client, user_headers):
    response = client.post("/api/voice/stt", data={"language": "id-ID", "continuous": "true"}, headers=user_headers)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()["data"]
    assert data["language"] == "id-ID"
    assert data["continuous"] is True
    assert data["method"] == "browser-speech-api"


def test_stt_rejects_non_audio_upload(client, user_headers):
    response = client.post(
        "/api/voice/stt",
        files={"audio": ("notes.txt", b"hello", "text/plain")},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_stt_without_whisper_is_unavailable(client, user_headers):
    response = client.post(
        "/api/voice/stt",
        files={"audio": ("answer.wav", b"RIFF0000WAVE", "audio/wav")},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE


def test_translate_to_english_passthrough(client, user_headers):
    response = client.post(
        "/api/voice/translate",
        json={"text": "Selamat pagi", "target_language": "en", "source_language": "ms"},
        headers=user_headers,
    )
    data = response.json()["data"]
    assert data["translated_text"] == "Selamat pagi"
    assert data["method"] == "passthrough"
    assert data["source_language"] == "ms"


def test_translate_without_ai_returns_503(client, user_headers):
    response = client.post(
        "/api/voice/translate",
        json={"text": "Good morning", "target_language": "th"},
        headers=user_headers,
    )
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["message"] == "AI services are temporarily unavailable"


def test_quality_recommendations(client, user_headers):
    response = client.post(
        "/api/voice/quality-recommendations",
        json={"volume": 0.95, "duration": 4, "noise_level": 0.1, "language": "vi"},
        headers=user_headers,
    )
    data = response.json()["data"]
    assert data[0] == "Audio volume is too high. Please speak further from the microphone."
    assert data[1:] == ["Nói rõ ràng và chậm rãi", "Sử dụng phát âm đúng cho thuật ngữ kỹ thuật", "Tạm dừng giữa các câu"]
