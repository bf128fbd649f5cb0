"""mdlinks API: command functions returning StageResult."""
