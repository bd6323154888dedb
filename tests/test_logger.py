import logging

from massing3d.utils.logger import log_condition_summary, setup_logger


def test_setup_logger_replaces_handlers(tmp_path):
    log_file = tmp_path / 'logs' / 'roof.log'
    logger = setup_logger('massing3d.test', level=logging.DEBUG, log_file=str(log_file))
    logger = setup_logger('massing3d.test', level=logging.DEBUG, log_file=str(log_file))

    assert len(logger.handlers) == 2
    logger.debug("hello roof")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    assert 'hello roof' in log_file.read_text()


def test_condition_summary(caplog):
    logger = logging.getLogger('massing3d.summary')
    entry = {
        'roof_type': 'hipped', 'roof_active': True, 'base_z': 12.0, 'ridge_z': 30.0,
        'pitch': {'angle_deg': 60.94, 'pitch_ratio': '21.6:12'}, 'total_faces': 14,
    }

    with caplog.at_level(logging.INFO, logger='massing3d.summary'):
        log_condition_summary('existing', entry, logger)
        log_condition_summary('proposed', {'roof_type': 'flat', 'base_z': 22.0}, logger)

    assert 'existing: hipped roof 12.00 -> 30.00, pitch 60.9 deg (21.6:12), 14 faces' in caplog.text
    assert 'proposed: no roof (flat), height 22.00' in caplog.text
