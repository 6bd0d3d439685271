"""Canonical pattern profile."""

from datetime import date

from commit_pattern.schema import DateRange

ACTIVITY_PROBABILITY = 0.70
EVENTS_PER_ACTIVE_DAY = (1, 6)
DATE_RANGE = DateRange(start=date(2025, 5, 4), end=date(2025, 6, 7))

TARGETS = [
    "src/main/java/com/screenshare/server/ScreenShareServer.java",
    "src/main/java/com/screenshare/server/ClientHandler.java",
    "src/main/java/com/screenshare/server/ServerConfig.java",
    "src/main/java/com/screenshare/client/ScreenShareClient.java",
    "src/main/java/com/screenshare/client/ClientConfig.java",
    "src/main/java/com/screenshare/common/Message.java",
    "src/main/java/com/screenshare/common/MessageType.java",
    "src/main/java/com/screenshare/common/Protocol.java",
    "src/main/java/com/screenshare/common/NetworkBuffer.java",
    "src/main/java/com/screenshare/util/Logger.java",
]

ANNOTATIONS = [
    "// TODO: Add unit tests",
    "// FIXME: Concurrency issue needs attention",
    "// NOTE: Code modularity improved",
    "// Refactored network layer",
    "// Enhanced thread safety",
    "// Optimized socket handling",
    "// Improved error logging",
    "// Updated server configuration handling",
    "// Codebase cleanup and style consistency",
    "// Improved object serialization logic",
    "// Simplified client-server handshake",
    "// Modularized protocol logic",
    "// Improved message parsing reliability",
    "// Logging mechanism refactored",
    "// Added null safety checks",
    "// Thread pooling enhanced",
    "// Performance tweaks for high load",
    "// Removed dead code from protocol",
    "// Updated JavaDoc comments",
    "// Introduced proper resource cleanup",
]
