import logging
import os
import stat

from stat_counter import StatCounter


class LocalFS:
    def __init__(self, base_path):
        self.base_path = base_path
        self.clear()

    def clear(self):
        self.file_count = 0
        self.error_count = 0

    def _on_walk_error(self, e: OSError):
        self.error_count += 1
        logging.error('Cannot read %s: %s', e.filename, e.strerror)

    def scan(self, stats: StatCounter):
        """Feed the size of every non-directory entry under base_path into stats.

        Entries are stat'ed without following links, so a symlink counts as a
        file of the link's own size even when it points at a directory. A root
        that is not a directory is counted as a single file.
        """
        logging.info('Scanning %s', self.base_path)
        self.clear()
        st = os.lstat(self.base_path)
        if not stat.S_ISDIR(st.st_mode):
            stats.add_file(st.st_size)
            self.file_count += 1
            logging.info('%s is not a directory, counted as a single file', self.base_path)
            return stats
        for root, dirs, files in os.walk(self.base_path, onerror=self._on_walk_error):
            links = [d for d in dirs if os.path.islink(os.path.join(root, d))]
            for file in links + files:
                try:
                    size = self.get_file_size(os.path.join(root, file))
                except OSError as e:
                    self.error_count += 1
                    logging.exception(e)
                    continue
                stats.add_file(size)
                self.file_count += 1
        logging.info('%s files scanned, %s entries skipped', self.file_count, self.error_count)
        return stats

    def get_file_size(self, path):
        return os.lstat(path).st_size
