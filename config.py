import logging

block_size = 4 * 1024
bucket_count = 40
progress_interval = 1

log_level = logging.INFO
log_format = '%(asctime)s.%(msecs)03d %(levelname)s %(message)s'
