"""Reference fixture: a small mixed hierarchy of documents and media."""

from hierarchy_stats.models.record import FileRecord

SAMPLE_RECORDS: list[FileRecord] = [
    FileRecord(1, "Document.txt", ("Documents",), 3, 1024),
    FileRecord(2, "Image.jpg", ("Media", "Photos"), 34, 2048),
    FileRecord(3, "Folder", ("Folder",), None, 0),
    FileRecord(5, "Spreadsheet.xlsx", ("Documents", "Excel"), 3, 4096),
    FileRecord(8, "Backup.zip", ("Backup",), 233, 8192),
    FileRecord(13, "Presentation.pptx", ("Documents", "Presentation"), 3, 3072),
    FileRecord(21, "Video.mp4", ("Media", "Videos"), 34, 6144),
    FileRecord(34, "Folder2", ("Folder",), 3, 0),
    FileRecord(55, "Code.py", ("Programming",), None, 1536),
    FileRecord(89, "Audio.mp3", ("Media", "Audio"), 34, 2560),
    FileRecord(144, "Spreadsheet2.xlsx", ("Documents", "Excel"), 3, 2048),
    FileRecord(233, "Folder3", ("Folder",), None, 4096),
]
