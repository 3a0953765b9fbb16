def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import shaderprep.core.interfaces as I

    assert hasattr(I, "ShaderCompilerProtocol")
    assert hasattr(I, "ProtocolLoader")
    assert hasattr(I, "ProtocolRegistryProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")


def test_default_implementations_satisfy_protocols():
    import logging

    from shaderprep.core.interfaces import LoggerLikeProtocol, ProtocolRegistryProtocol
    from shaderprep.loading import ProtocolRegistry

    assert isinstance(ProtocolRegistry(), ProtocolRegistryProtocol)
    assert isinstance(logging.getLogger("shaderprep.test"), LoggerLikeProtocol)


def test_package_surface():
    import shaderprep

    for name in shaderprep.__all__:
        assert hasattr(shaderprep, name), name
    assert shaderprep.__version__
