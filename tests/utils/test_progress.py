"""
Unit tests for progress indicator utilities.
"""
import sys
from unittest.mock import patch, MagicMock

from sniax.utils.progress import ProgressIndicator, progress_bar


class TestProgressIndicator:
    """Test progress indicator functionality."""

    def test_init(self):
        """Test initialization."""
        progress = ProgressIndicator(total=100, desc="Processing", disable=False, unit="items")

        assert progress.total == 100
        assert progress.desc == "Processing"
        assert progress.disable is False
        assert progress.unit == "items"
        assert progress.tqdm_instance is None

    def test_start(self):
        """Test that start creates a tqdm bar on stderr."""
        with patch('sniax.utils.progress.tqdm') as mock_tqdm:
            mock_tqdm_instance = MagicMock()
            mock_tqdm.return_value = mock_tqdm_instance

            progress = ProgressIndicator(total=100, desc="Processing")
            progress.start()

            assert progress.tqdm_instance == mock_tqdm_instance
            mock_tqdm.assert_called_once_with(
                total=100,
                desc="Processing",
                unit="it",
                file=sys.stderr,
                leave=False
            )

    def test_update(self):
        """Test that updates are forwarded to tqdm."""
        with patch('sniax.utils.progress.tqdm') as mock_tqdm:
            mock_tqdm_instance = MagicMock()
            mock_tqdm.return_value = mock_tqdm_instance

            progress = ProgressIndicator(total=10)
            progress.start()
            progress.update(3)

            mock_tqdm_instance.update.assert_called_once_with(3)

    def test_disabled(self):
        """Test that a disabled indicator never touches tqdm."""
        with patch('sniax.utils.progress.tqdm') as mock_tqdm:
            progress = ProgressIndicator(total=10, disable=True)
            progress.start()
            progress.update(1)
            progress.close()

            mock_tqdm.assert_not_called()
            assert progress.tqdm_instance is None


class TestProgressBar:
    """Test the progress bar context manager."""

    def test_closes_on_exit(self):
        """Test that the bar is closed even when the body raises."""
        with patch('sniax.utils.progress.tqdm') as mock_tqdm:
            mock_tqdm_instance = MagicMock()
            mock_tqdm.return_value = mock_tqdm_instance

            try:
                with progress_bar(total=5, desc="Probing") as progress:
                    progress.update(1)
                    raise RuntimeError("boom")
            except RuntimeError:
                pass

            mock_tqdm_instance.close.assert_called_once()
